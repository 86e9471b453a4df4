import logging

from flask import current_app, jsonify
from flask_wtf.csrf import CSRFError
from werkzeug.exceptions import HTTPException

from models import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors

    def to_dict(self):
        body = {'message': self.message}
        if self.errors:
            body['errors'] = self.errors
        return body


class ValidationError(ApiError):
    """Malformed input. ``errors`` maps field names to lists of messages."""
    status_code = 400


class AuthenticationError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


def structure_errors(exc):
    """Flatten a pydantic ValidationError into ``{field: [messages]}``."""
    structured = {}
    for error in exc.errors(include_url=False):
        loc = error.get('loc', ())
        key = '.'.join(str(part) for part in loc) if loc else '__root__'
        structured.setdefault(key, []).append(error.get('msg', 'Invalid value'))
    return structured


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        return jsonify({'message': error.description}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.exception("Unhandled error while processing request")
        if current_app.config.get('STORAGE_BACKEND') == 'database':
            db.session.rollback()
        return jsonify({'message': 'Internal server error'}), 500
