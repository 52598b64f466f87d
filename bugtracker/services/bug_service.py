"""
bug_service.py - Bug lifecycle service
Single responsibility: validate new reports and move bugs through the workflow.
"""
import logging
from typing import Callable

from bugtracker.database.repositories.bugs import BugRepository
from bugtracker.domain.errors import BugNotFoundError, ValidationError
from bugtracker.domain.models import Bug, BugPriority, BugStatus, User
from bugtracker.domain.transitions import apply_transition
from bugtracker.utils.ids import new_id
from bugtracker.utils.time import now_iso

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "Title is required"
DESCRIPTION_REQUIRED = "Description is required"
STEPS_REQUIRED = "Steps to reproduce are required"
INVALID_PRIORITY = "Please select a valid priority"
REPORT_SUCCESS = "Bug reported successfully!"

DEFAULT_PRIORITY = BugPriority.MEDIUM


def validate_report(
    title: str | None,
    description: str | None,
    steps: str | None,
    priority: BugPriority | str = DEFAULT_PRIORITY,
) -> str | None:
    """Only the first failing field is reported (title, description, steps, priority)."""
    if not (title or "").strip():
        return TITLE_REQUIRED
    if not (description or "").strip():
        return DESCRIPTION_REQUIRED
    if not (steps or "").strip():
        return STEPS_REQUIRED
    try:
        BugPriority(priority)
    except ValueError:
        return INVALID_PRIORITY
    return None


class BugService:
    def __init__(
        self,
        bugs: BugRepository,
        clock: Callable[[], str] = now_iso,
        id_factory: Callable[[], str] = new_id,
    ):
        self.bugs = bugs
        self.clock = clock
        self.id_factory = id_factory

    def list_bugs(self) -> list[Bug]:
        return self.bugs.list()

    def report_bug(
        self,
        title: str,
        description: str,
        steps: str,
        priority: BugPriority | str,
        reporter_id: str,
    ) -> Bug:
        error = validate_report(title, description, steps, priority)
        if error:
            raise ValidationError(error)
        bug = Bug(
            id=self.id_factory(),
            title=title.strip(),
            description=description.strip(),
            steps=steps.strip(),
            priority=BugPriority(priority),
            status=BugStatus.REPORTED,
            reported_by=reporter_id,
            reported_at=self.clock(),
        )
        self.bugs.add(bug)
        logger.info("Bug %s reported by %s", bug.id, reporter_id)
        return bug

    def move_bug(self, bug_id: str, new_status: BugStatus | str, acting_user: User) -> Bug:
        current = self.bugs.get(bug_id)
        if current is None:
            raise BugNotFoundError(bug_id)
        updated = apply_transition(current, new_status, acting_user.id, now=self.clock())
        self.bugs.update_by_id(updated)
        logger.info(
            "Bug %s moved %s -> %s by %s",
            bug_id,
            current.status.value,
            updated.status.value,
            acting_user.id,
        )
        return updated

    def delete_bug(self, bug_id: str) -> bool:
        return self.bugs.delete_by_id(bug_id)
