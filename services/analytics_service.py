from collections import Counter
from dataclasses import dataclass, field

from utils import local_today, percentage, trailing_days


@dataclass
class AnalyticsSnapshot:
    total_habits: int
    completed_today: int
    overall_completion_rate: int
    weekly_progress: list = field(default_factory=list)
    category_stats: dict = field(default_factory=dict)

    def category_breakdown(self):
        return [
            {'category': category, 'count': count, 'percentage': percentage(count, self.total_habits)}
            for category, count in self.category_stats.items()
        ]

    def to_dict(self):
        return {
            'totalHabits': self.total_habits,
            'completedToday': self.completed_today,
            'overallCompletionRate': self.overall_completion_rate,
            'weeklyProgress': self.weekly_progress,
            'categoryStats': self.category_stats,
            'categoryBreakdown': self.category_breakdown(),
        }


def habits_with_completion(storage, owner_id, today=None):
    today = today or local_today()
    habits = storage.list_habits(owner_id)
    completions = storage.list_completions(owner_id)

    # Map: habit_id -> [completions]
    by_habit = {}
    for c in completions:
        by_habit.setdefault(c.habit_id, []).append(c)

    enriched = []
    for h in habits:
        records = by_habit.get(h.id, [])
        done = [c for c in records if c.completed]
        data = h.to_dict()
        data['isCompletedToday'] = any(c.date == today for c in done)
        data['completionRate'] = percentage(len(done), len(records))
        enriched.append(data)
    return enriched


def compute_analytics(storage, owner_id, today=None):
    today = today or local_today()
    habits = storage.list_habits(owner_id)
    completions = storage.list_completions(owner_id)
    total_habits = len(habits)

    done_per_day = Counter(c.date for c in completions if c.completed)

    weekly_progress = [
        {'date': d.isoformat(), 'completionRate': percentage(done_per_day[d], total_habits)}
        for d in trailing_days(today)
    ]

    return AnalyticsSnapshot(
        total_habits=total_habits,
        completed_today=done_per_day[today],
        overall_completion_rate=percentage(sum(done_per_day.values()), len(completions)),
        weekly_progress=weekly_progress,
        category_stats=dict(Counter(h.category for h in habits)),
    )


def today_summary(storage, owner_id, today=None):
    """Daily habits split by whether they are done today."""
    habits = [h for h in habits_with_completion(storage, owner_id, today) if h['frequency'] == 'daily']
    completed = [h for h in habits if h['isCompletedToday']]
    active = [h for h in habits if not h['isCompletedToday']]
    return {
        'active': active,
        'completed': completed,
        'total': len(habits),
        'completedCount': len(completed),
        'progressPercentage': percentage(len(completed), len(habits)),
    }
