import datetime
import math


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def parse_published_at(value: str) -> datetime.datetime:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Date-only values become midnight UTC, naive datetimes are read as UTC.
    Raises ValueError for anything else.
    """
    parsed = datetime.datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed.astimezone(datetime.timezone.utc)
