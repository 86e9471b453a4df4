from datetime import date, timedelta

from werkzeug.security import generate_password_hash

from app import create_app
from services.completion_service import reconcile
from storage import get_storage

DEMO_HABITS = [
    ('Morning Run', 'Fitness', 'daily'),
    ('Drink Water', 'Health', 'daily'),
    ('Read 20 Pages', 'Learning', 'daily'),
    ('Meditate', 'Mindfulness', 'weekdays'),
    ('Call Family', 'Social', 'weekly'),
]


def create_test_account(app=None, username='john', password='password123', days=14):
    app = app or create_app()
    with app.app_context():
        storage = get_storage()
        user = storage.get_user_by_username(username)
        if user:
            print(f"User '{username}' already exists.")
            return user

        user = storage.create_user(username, generate_password_hash(password, method='scrypt'),
                                   first_name=username.capitalize())
        print(f"User '{username}' created.")

        today = date.today()
        for index, (name, category, frequency) in enumerate(DEMO_HABITS):
            habit = storage.create_habit(user.id, name, category, frequency)
            # Every habit skips a different day of the cycle
            for offset in range(days):
                reconcile(storage, habit.id, today - timedelta(days=offset), (offset + index) % 3 != 0)

        print(f"Added {len(DEMO_HABITS)} habits with {days} days of history.")
        return user


if __name__ == "__main__":
    create_test_account()
