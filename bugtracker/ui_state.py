"""
ui_state.py - UI state container
"""
import threading
from typing import Callable

from bugtracker.domain.filters import ALL
from bugtracker.domain.models import BugPriority, User


class AppState:
    def __init__(self):
        self.user: User | None = None
        self.search_term: str = ""
        self.status_filter: str = ALL  # admin dashboard
        self.priority_filter: str = ALL  # developer board
        self.form_priority: str = BugPriority.MEDIUM.value
        self.error: str = ""
        self.success: str = ""
        self.success_timer: threading.Timer | None = None

    def schedule_success_clear(self, seconds: float, callback: Callable[[], None]) -> None:
        """Run callback once after seconds; a newer schedule replaces the pending one."""
        self.cancel_success_timer()
        timer = threading.Timer(seconds, callback)
        timer.daemon = True
        self.success_timer = timer
        timer.start()

    def cancel_success_timer(self) -> None:
        if self.success_timer is not None:
            self.success_timer.cancel()
            self.success_timer = None

    def reset_filters(self) -> None:
        self.cancel_success_timer()
        self.search_term = ""
        self.status_filter = ALL
        self.priority_filter = ALL
        self.form_priority = BugPriority.MEDIUM.value
        self.error = ""
        self.success = ""
