from flask import jsonify
from flask_login import login_required, current_user

from . import analytics_bp
from services.analytics_service import compute_analytics
from storage import get_storage


@analytics_bp.route('', methods=['GET'])
@login_required
def analytics():
    return jsonify(compute_analytics(get_storage(), current_user.id).to_dict())
