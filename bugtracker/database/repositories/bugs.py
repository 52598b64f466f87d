"""
bugs.py - Bug repository
Single responsibility: persistence for the bug collection.
"""
import logging

from bugtracker.database.repositories.storage import StorageAdapter
from bugtracker.domain.errors import BugNotFoundError, DuplicateBugIdError
from bugtracker.domain.models import Bug

logger = logging.getLogger(__name__)


class BugRepository:
    """Every mutation reads the whole collection, changes it and writes it back."""

    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def list(self) -> list[Bug]:
        return self.storage.load_bugs()

    def get(self, bug_id: str) -> Bug | None:
        return next((b for b in self.storage.load_bugs() if b.id == bug_id), None)

    def add(self, bug: Bug) -> None:
        bugs = self.storage.load_bugs()
        if any(b.id == bug.id for b in bugs):
            raise DuplicateBugIdError(bug.id)
        bugs.append(bug)
        self.storage.save_bugs(bugs)

    def update_by_id(self, bug: Bug) -> None:
        bugs = self.storage.load_bugs()
        for i, existing in enumerate(bugs):
            if existing.id == bug.id:
                bugs[i] = bug
                self.storage.save_bugs(bugs)
                return
        raise BugNotFoundError(bug.id)

    def delete_by_id(self, bug_id: str) -> bool:
        bugs = self.storage.load_bugs()
        remaining = [b for b in bugs if b.id != bug_id]
        if len(remaining) == len(bugs):
            logger.debug("delete_by_id: %s not present", bug_id)
            return False
        self.storage.save_bugs(remaining)
        return True
