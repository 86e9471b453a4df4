import logging

from flask import request, jsonify
from flask_login import login_user, logout_user, login_required, current_user
from flask_wtf.csrf import generate_csrf
from werkzeug.security import generate_password_hash, check_password_hash

from . import auth_bp
from errors import AuthenticationError, ValidationError
from schemas import LoginRequest, SignupRequest, parse_payload
from storage import get_storage

logger = logging.getLogger(__name__)


@auth_bp.route('/csrf', methods=['GET'])
def csrf_token():
    return jsonify({'csrfToken': generate_csrf()})


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = parse_payload(SignupRequest, request.get_json(silent=True), "Invalid signup data")
    storage = get_storage()
    if storage.get_user_by_username(data.username):
        raise ValidationError("Username already exists", errors={'username': ['Username already exists']})

    user = storage.create_user(
        data.username,
        generate_password_hash(data.password, method='scrypt'),
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
    )
    login_user(user)
    logger.info("User %s signed up", user.id)
    return jsonify(user.to_dict()), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    data = parse_payload(LoginRequest, request.get_json(silent=True), "Invalid login data")
    user = get_storage().get_user_by_username(data.username)
    if not user or not check_password_hash(user.password_hash, data.password):
        raise AuthenticationError("Invalid username or password")
    login_user(user)
    return jsonify(user.to_dict())


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return '', 204


@auth_bp.route('/user', methods=['GET'])
@login_required
def current_profile():
    return jsonify(current_user.to_dict())
