from flask import request, jsonify
from flask_login import login_required, current_user

from . import completions_bp
from errors import ValidationError
from storage import get_storage
from utils import parse_day


@completions_bp.route('', methods=['GET'])
@login_required
def list_completions():
    start_str = request.args.get('startDate')
    end_str = request.args.get('endDate')
    if not start_str or not end_str:
        raise ValidationError("Start date and end date are required")

    start_date = parse_day(start_str, 'startDate')
    end_date = parse_day(end_str, 'endDate')
    habit_id = request.args.get('habitId') or None

    completions = get_storage().completions_in_range(current_user.id, start_date, end_date, habit_id=habit_id)
    return jsonify([c.to_dict() for c in completions])
