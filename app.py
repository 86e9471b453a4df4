import logging
import os

from flask import Flask, request, jsonify

from config import Config
from errors import register_error_handlers
from extensions import csrf, login_manager, migrate
from models import db
from storage import build_storage, get_storage

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations')
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


def configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    logging.basicConfig(level=level, format=LOG_FORMAT)
    app.logger.setLevel(level)


def create_app(config_object=None, storage=None, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.update(overrides)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    csrf.init_app(app)
    login_manager.init_app(app)

    if storage is None:
        storage = build_storage(app)
    app.config['STORAGE_BACKEND'] = storage.name
    app.extensions['habit_storage'] = storage

    if storage.name == 'database':
        with app.app_context():
            db.create_all()

    from routes import habits_bp, completions_bp, analytics_bp, auth_bp
    app.register_blueprint(habits_bp, url_prefix='/api/habits')
    app.register_blueprint(completions_bp, url_prefix='/api/completions')
    app.register_blueprint(analytics_bp, url_prefix='/api/analytics')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        if request.path.startswith('/api'):
            logger.debug("%s %s %s", request.method, request.path, response.status_code)
        return response

    logger.info("Habit tracker started with %s storage", storage.name)
    return app


@login_manager.user_loader
def load_user(user_id):
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return get_storage().get_user(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'message': 'Authentication required'}), 401


if __name__ == '__main__':
    create_app().run(debug=True)
