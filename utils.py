from datetime import date, datetime, timedelta

from errors import ValidationError

DATE_FORMAT = '%Y-%m-%d'


def percentage(part, whole):
    """Integer percentage of ``part`` in ``whole``, rounding halves up. 0 when ``whole`` is 0."""
    if not whole:
        return 0
    return (200 * part + whole) // (2 * whole)


def parse_day(value, field='date'):
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field} is required", errors={field: ['Expected a date in YYYY-MM-DD format']})
    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        parsed = None
    # strptime also takes unpadded months and days
    if parsed is None or parsed.isoformat() != value:
        raise ValidationError(f"Invalid {field}", errors={field: ['Expected a date in YYYY-MM-DD format']})
    return parsed


def trailing_days(today, count=7):
    """The ``count`` calendar days ending on ``today``, oldest first."""
    return [today - timedelta(days=i) for i in range(count - 1, -1, -1)]


def local_today():
    return date.today()
