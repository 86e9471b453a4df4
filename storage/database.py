import uuid
from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError

from models import db, User, Habit, HabitCompletion
from .base import Storage

UPSERT_DIALECTS = {
    'sqlite': sqlite.insert,
    'postgresql': postgresql.insert,
}


class DatabaseStorage(Storage):
    """SQLAlchemy-backed store using the application's ``db`` session."""

    name = 'database'

    def get_user(self, user_id):
        return db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def create_user(self, username, password_hash, **profile):
        user = User(username=username, password_hash=password_hash, **profile)
        db.session.add(user)
        db.session.commit()
        return user

    def list_habits(self, owner_id):
        return Habit.query.filter_by(user_id=owner_id).order_by(Habit.created_at.asc()).all()

    def get_habit(self, habit_id, owner_id):
        return Habit.query.filter_by(id=habit_id, user_id=owner_id).first()

    def create_habit(self, owner_id, name, category, frequency='daily'):
        habit = Habit(user_id=owner_id, name=name, category=category, frequency=frequency or 'daily')
        db.session.add(habit)
        db.session.commit()
        return habit

    def update_habit(self, habit_id, owner_id, changes):
        habit = self.get_habit(habit_id, owner_id)
        if habit is None:
            return None
        for field, value in changes.items():
            setattr(habit, field, value)
        db.session.commit()
        return habit

    def delete_habit(self, habit_id, owner_id):
        habit = self.get_habit(habit_id, owner_id)
        if habit is None:
            return False
        db.session.delete(habit)
        db.session.commit()
        return True

    def _owned_completions(self, owner_id, habit_id=None):
        query = HabitCompletion.query.join(Habit).filter(Habit.user_id == owner_id)
        if habit_id is not None:
            query = query.filter(HabitCompletion.habit_id == habit_id)
        return query

    def list_completions(self, owner_id, habit_id=None, day=None):
        query = self._owned_completions(owner_id, habit_id)
        if day is not None:
            query = query.filter(HabitCompletion.date == day)
        return query.order_by(HabitCompletion.date.asc()).all()

    def completions_in_range(self, owner_id, start, end, habit_id=None):
        return (self._owned_completions(owner_id, habit_id)
                .filter(HabitCompletion.date >= start, HabitCompletion.date <= end)
                .order_by(HabitCompletion.date.asc())
                .all())

    def upsert_completion(self, habit_id, day, completed):
        values = {
            'completed': completed,
            'completed_at': datetime.now(timezone.utc) if completed else None,
        }
        insert = UPSERT_DIALECTS.get(db.engine.dialect.name)
        if insert is not None:
            stmt = insert(HabitCompletion).values(id=str(uuid.uuid4()), habit_id=habit_id, date=day, **values)
            stmt = stmt.on_conflict_do_update(index_elements=['habit_id', 'date'], set_=values)
            db.session.execute(stmt)
        else:
            self._insert_or_update(habit_id, day, values)
        db.session.commit()
        return HabitCompletion.query.filter_by(habit_id=habit_id, date=day).one()

    def _insert_or_update(self, habit_id, day, values):
        # The unique constraint decides the race: a losing insert falls back to an update.
        updated = (HabitCompletion.query
                   .filter_by(habit_id=habit_id, date=day)
                   .update(values, synchronize_session=False))
        if updated:
            return
        try:
            with db.session.begin_nested():
                db.session.add(HabitCompletion(habit_id=habit_id, date=day, **values))
        except IntegrityError:
            (HabitCompletion.query
             .filter_by(habit_id=habit_id, date=day)
             .update(values, synchronize_session=False))
