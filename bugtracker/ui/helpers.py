"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from bugtracker.config import COLOR_TEXT_MUTED, PRIORITY_COLORS, STATUS_COLORS
from bugtracker.utils.time import parse_iso


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to local "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    dt = parse_iso(iso_str)
    if dt is None:
        return iso_str or ""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime("%Y-%m-%d %H:%M")


def status_colors(status: str) -> tuple[str, str]:
    return STATUS_COLORS.get(status, ("#F3F4F6", COLOR_TEXT_MUTED))


def priority_colors(priority: str) -> tuple[str, str]:
    return PRIORITY_COLORS.get(priority, ("#F3F4F6", COLOR_TEXT_MUTED))


def user_label(names: dict[str, str], user_id: str | None) -> str:
    if not user_id:
        return ""
    return names.get(user_id, "Unknown user")
