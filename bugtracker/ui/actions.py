"""
actions.py - UI-side actions
Single responsibility: run user actions against services and surface errors.
"""
import logging

import flet as ft

from bugtracker.config import COLOR_DANGER
from bugtracker.db import Services
from bugtracker.domain.errors import BugTrackerError, StorageError, ValidationError
from bugtracker.domain.models import Bug, BugStatus, User
from bugtracker.services.bug_service import validate_report
from bugtracker.services.session_service import validate_login

logger = logging.getLogger(__name__)


def show_error(page: ft.Page, message: str) -> None:
    page.snack_bar = ft.SnackBar(ft.Text(message), bgcolor=COLOR_DANGER)
    page.snack_bar.open = True
    page.update()


def show_storage_error(page: ft.Page, exc: Exception) -> None:
    page.overlay.append(
        ft.AlertDialog(
            title=ft.Text("Storage unavailable"),
            content=ft.Text(f"The saved data could not be read or written.\nDetails: {exc}"),
            open=True,
        )
    )
    page.update()


def submit_login(page: ft.Page, services: Services, name: str, role: str | None) -> tuple[User | None, str]:
    """Return (user, "") on success or (None, message) when the form is rejected."""
    error = validate_login(name, role)
    if error:
        return None, error
    try:
        return services.session.login(name, role), ""
    except StorageError as exc:
        logger.exception("Login failed")
        show_storage_error(page, exc)
        return None, str(exc)


def submit_report(
    page: ft.Page,
    services: Services,
    user: User,
    title: str,
    description: str,
    steps: str,
    priority: str,
) -> tuple[Bug | None, str]:
    """Return (bug, "") on success or (None, message) when the form is rejected."""
    error = validate_report(title, description, steps, priority)
    if error:
        return None, error
    try:
        bug = services.bug_service.report_bug(title, description, steps, priority, user.id)
    except ValidationError as exc:
        return None, exc.message
    except StorageError as exc:
        logger.exception("Bug report failed")
        show_storage_error(page, exc)
        return None, str(exc)
    return bug, ""


def move_bug(page: ft.Page, services: Services, user: User, bug_id: str, status: BugStatus) -> Bug | None:
    try:
        return services.bug_service.move_bug(bug_id, status, user)
    except StorageError as exc:
        logger.exception("Moving bug %s failed", bug_id)
        show_storage_error(page, exc)
    except BugTrackerError as exc:
        logger.warning("Moving bug %s rejected: %s", bug_id, exc)
        show_error(page, str(exc))
    return None
