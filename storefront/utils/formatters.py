from datetime import datetime, timezone


def utc_now():
    return datetime.now(timezone.utc)


def isoformat(value):
    """Format a datetime as an ISO-8601 UTC string with millisecond precision."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def utc_now_iso():
    return isoformat(utc_now())
