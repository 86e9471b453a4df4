import itertools
import threading
import uuid
from datetime import datetime, timezone

from models import User, Habit, HabitCompletion
from .base import Storage


class MemoryStorage(Storage):
    """Dictionary-backed store for tests and throwaway instances.

    Completions are keyed by ``(habit_id, date)`` so a second record for the
    same pair cannot exist. A single lock serialises writers.
    """

    name = 'memory'

    def __init__(self):
        self._lock = threading.RLock()
        self._user_ids = itertools.count(1)
        self._users = {}
        self._habits = {}
        self._completions = {}

    def get_user(self, user_id):
        return self._users.get(user_id)

    def get_user_by_username(self, username):
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return user
        return None

    def create_user(self, username, password_hash, **profile):
        with self._lock:
            now = datetime.now(timezone.utc)
            user = User(id=next(self._user_ids), username=username, password_hash=password_hash,
                        created_at=now, updated_at=now, **profile)
            self._users[user.id] = user
            return user

    def list_habits(self, owner_id):
        with self._lock:
            return [h for h in self._habits.values() if h.user_id == owner_id]

    def get_habit(self, habit_id, owner_id):
        habit = self._habits.get(habit_id)
        if habit is None or habit.user_id != owner_id:
            return None
        return habit

    def create_habit(self, owner_id, name, category, frequency='daily'):
        with self._lock:
            habit = Habit(id=str(uuid.uuid4()), user_id=owner_id, name=name, category=category,
                          frequency=frequency or 'daily', created_at=datetime.now(timezone.utc))
            self._habits[habit.id] = habit
            return habit

    def update_habit(self, habit_id, owner_id, changes):
        with self._lock:
            habit = self.get_habit(habit_id, owner_id)
            if habit is None:
                return None
            for field, value in changes.items():
                setattr(habit, field, value)
            return habit

    def delete_habit(self, habit_id, owner_id):
        with self._lock:
            if self.get_habit(habit_id, owner_id) is None:
                return False
            del self._habits[habit_id]
            for key in [k for k in self._completions if k[0] == habit_id]:
                del self._completions[key]
            return True

    def _owned_completions(self, owner_id, habit_id=None):
        with self._lock:
            owned = {h.id for h in self.list_habits(owner_id)}
            if habit_id is not None:
                owned &= {habit_id}
            return [c for (hid, _), c in self._completions.items() if hid in owned]

    def list_completions(self, owner_id, habit_id=None, day=None):
        completions = self._owned_completions(owner_id, habit_id)
        if day is not None:
            completions = [c for c in completions if c.date == day]
        return sorted(completions, key=lambda c: c.date)

    def completions_in_range(self, owner_id, start, end, habit_id=None):
        completions = [c for c in self._owned_completions(owner_id, habit_id) if start <= c.date <= end]
        return sorted(completions, key=lambda c: c.date)

    def upsert_completion(self, habit_id, day, completed):
        with self._lock:
            completed_at = datetime.now(timezone.utc) if completed else None
            completion = self._completions.get((habit_id, day))
            if completion is None:
                completion = HabitCompletion(id=str(uuid.uuid4()), habit_id=habit_id, date=day)
                self._completions[(habit_id, day)] = completion
            completion.completed = completed
            completion.completed_at = completed_at
            return completion
