class Storage:
    """Persistence contract shared by the in-memory and database backends."""

    name = None

    # Users

    def get_user(self, user_id):
        raise NotImplementedError

    def get_user_by_username(self, username):
        raise NotImplementedError

    def create_user(self, username, password_hash, **profile):
        raise NotImplementedError

    # Habits

    def list_habits(self, owner_id):
        raise NotImplementedError

    def get_habit(self, habit_id, owner_id):
        raise NotImplementedError

    def create_habit(self, owner_id, name, category, frequency='daily'):
        raise NotImplementedError

    def update_habit(self, habit_id, owner_id, changes):
        """Merge ``changes`` into the habit. Returns None when the owner has no such habit."""
        raise NotImplementedError

    def delete_habit(self, habit_id, owner_id):
        """Delete the habit and its completions. Returns False when nothing was deleted."""
        raise NotImplementedError

    # Completions

    def list_completions(self, owner_id, habit_id=None, day=None):
        raise NotImplementedError

    def completions_in_range(self, owner_id, start, end, habit_id=None):
        """Completions dated ``start <= date <= end``, oldest first."""
        raise NotImplementedError

    def upsert_completion(self, habit_id, day, completed):
        """Set the completed state for (habit, day), creating the record if needed.

        Must leave exactly one record for the pair even under concurrent calls.
        """
        raise NotImplementedError
