"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import datetime, timedelta, timezone


def to_iso(dt: datetime) -> str:
    """UTC, millisecond precision, trailing "Z" (2024-05-01T12:00:00.000Z)."""
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


def days_ago_iso(days: float) -> str:
    return to_iso(datetime.now(timezone.utc) - timedelta(days=days))


def parse_iso(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


_UNITS = (
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
)


def format_distance_to_now(value: str | None, now: datetime | None = None) -> str:
    """Human distance such as "3 days" or "1 hour"; "" if unparseable."""
    dt = parse_iso(value)
    if dt is None:
        return ""
    now = now or datetime.now(timezone.utc)
    seconds = max(int((now - dt).total_seconds()), 0)
    for unit, size in _UNITS:
        count = seconds // size
        if count:
            return f"{count} {unit}" + ("s" if count > 1 else "")
    return "less than a minute"
