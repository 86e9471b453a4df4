import logging

from flask import request, jsonify
from flask_login import login_required, current_user

from . import habits_bp
from errors import NotFoundError
from schemas import HabitCreate, HabitUpdate, ToggleCompletion, parse_payload
from services.analytics_service import habits_with_completion, today_summary
from services.completion_service import reconcile
from storage import get_storage
from utils import parse_day

logger = logging.getLogger(__name__)


def get_owned_habit(habit_id):
    habit = get_storage().get_habit(habit_id, current_user.id)
    if habit is None:
        raise NotFoundError("Habit not found")
    return habit


@habits_bp.route('', methods=['GET'])
@login_required
def list_habits():
    return jsonify(habits_with_completion(get_storage(), current_user.id))


@habits_bp.route('/today', methods=['GET'])
@login_required
def todays_habits():
    return jsonify(today_summary(get_storage(), current_user.id))


@habits_bp.route('/<habit_id>', methods=['GET'])
@login_required
def get_habit(habit_id):
    return jsonify(get_owned_habit(habit_id).to_dict())


@habits_bp.route('', methods=['POST'])
@login_required
def create_habit():
    data = parse_payload(HabitCreate, request.get_json(silent=True), "Invalid habit data")
    habit = get_storage().create_habit(current_user.id, data.name, data.category, data.frequency.value)
    logger.info("User %s created habit %s", current_user.id, habit.id)
    return jsonify(habit.to_dict()), 201


@habits_bp.route('/<habit_id>', methods=['PATCH'])
@login_required
def update_habit(habit_id):
    data = parse_payload(HabitUpdate, request.get_json(silent=True), "Invalid habit data")
    habit = get_storage().update_habit(habit_id, current_user.id, data.changes())
    if habit is None:
        raise NotFoundError("Habit not found")
    logger.info("User %s updated habit %s", current_user.id, habit_id)
    return jsonify(habit.to_dict())


@habits_bp.route('/<habit_id>', methods=['DELETE'])
@login_required
def delete_habit(habit_id):
    if not get_storage().delete_habit(habit_id, current_user.id):
        raise NotFoundError("Habit not found")
    logger.info("User %s deleted habit %s", current_user.id, habit_id)
    return '', 204


@habits_bp.route('/<habit_id>/toggle', methods=['POST'])
@login_required
def toggle_habit(habit_id):
    data = parse_payload(ToggleCompletion, request.get_json(silent=True),
                         "Date and completed status are required")
    target_date = parse_day(data.date)
    habit = get_owned_habit(habit_id)

    completion = reconcile(get_storage(), habit.id, target_date, data.completed)
    return jsonify(completion.to_dict())
