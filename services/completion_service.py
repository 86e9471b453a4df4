import logging

logger = logging.getLogger(__name__)


def reconcile(storage, habit_id, day, completed):
    """Set the completed state of ``habit_id`` on ``day``, creating the record if absent.

    Ownership must already have been checked. Any calendar day is accepted.
    """
    completion = storage.upsert_completion(habit_id, day, bool(completed))
    logger.info("Habit %s marked %s for %s", habit_id, 'done' if completion.completed else 'not done', day.isoformat())
    return completion
