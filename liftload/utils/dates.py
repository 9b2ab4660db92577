from datetime import datetime, timezone


def now() -> datetime:
    return datetime.now(timezone.utc)


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical DynamoDB-friendly ISO8601.
    Always returns a UTC Z-suffixed string.
    """
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def seconds_between(start: datetime, end: datetime) -> float:
    """Elapsed seconds from start to end; negative if end is earlier."""
    return (end - start).total_seconds()
