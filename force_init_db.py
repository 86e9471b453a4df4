from flask_migrate import stamp

from app import create_app
from models import db


def force_init(app=None):
    app = app or create_app()
    with app.app_context():
        print("Dropping all tables...")
        db.drop_all()
        print("Creating all tables...")
        db.create_all()

        # Stamp the migration so flask-migrate thinks we are up to date
        stamp()
        print("Database initialized and stamped.")


if __name__ == "__main__":
    force_init()
