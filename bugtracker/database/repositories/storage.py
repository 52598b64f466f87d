"""
storage.py - Persistence adapter
Single responsibility: typed load/save of users, bugs and the session user
over a key-value string store.
"""
import json
import logging
from typing import Callable, TypeVar

from bugtracker.config import BUGS_KEY, CURRENT_USER_KEY, USERS_KEY
from bugtracker.database.store import KeyValueStore
from bugtracker.domain.errors import StorageError
from bugtracker.domain.models import Bug, BugPriority, BugStatus, Role, User
from bugtracker.utils.time import days_ago_iso, now_iso

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def sample_users() -> list[User]:
    return [
        User(id="1", name="Admin User", role=Role.ADMIN),
        User(id="2", name="Dev User", role=Role.DEVELOPER),
    ]


def sample_bugs() -> list[Bug]:
    return [
        Bug(
            id="1",
            title="Login button not working on Safari",
            description="Users cannot log in using Safari browser",
            steps="1. Open Safari\n2. Navigate to login page\n3. Enter credentials\n4. Click login button",
            priority=BugPriority.HIGH,
            status=BugStatus.REPORTED,
            reported_by="2",
            reported_at=days_ago_iso(1),
        ),
        Bug(
            id="2",
            title="Incorrect calculation in dashboard metrics",
            description="The total shown in the dashboard does not match the actual sum of values",
            steps="1. Log in\n2. Navigate to dashboard\n3. Compare the total with manual calculation",
            priority=BugPriority.MEDIUM,
            status=BugStatus.PROCESSING,
            reported_by="2",
            reported_at=days_ago_iso(2),
            verified_by="1",
            verified_at=days_ago_iso(1),
        ),
        Bug(
            id="3",
            title="Profile image not uploading",
            description="Users cannot upload new profile images",
            steps='1. Go to profile page\n2. Click "Change Image"\n3. Select an image\n4. Submit',
            priority=BugPriority.LOW,
            status=BugStatus.COMPLETED,
            reported_by="2",
            reported_at=days_ago_iso(3),
            verified_by="1",
            verified_at=days_ago_iso(2),
            completed_at=now_iso(),
        ),
    ]


class StorageAdapter:
    """
    Wraps a KeyValueStore. Collections are JSON arrays of camelCase records.

    Content that does not decode raises StorageError; nothing is written back
    in that case, so a mutation built on a failed read is aborted.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    # ------------------------------------------------------------------
    # decoding
    # ------------------------------------------------------------------

    def _load_list(self, key: str, parse: Callable[[dict], T]) -> list[T]:
        raw = self.store.get(key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [parse(item) for item in data]
        except _DECODE_ERRORS as e:
            logger.error("Corrupt content under %s: %s", key, e)
            raise StorageError(key=key) from e

    # ------------------------------------------------------------------
    # users
    # ------------------------------------------------------------------

    def load_users(self) -> list[User]:
        return self._load_list(USERS_KEY, User.from_dict)

    def save_users(self, users: list[User]) -> None:
        self.store.set(USERS_KEY, _dumps([u.to_dict() for u in users]))

    # ------------------------------------------------------------------
    # bugs
    # ------------------------------------------------------------------

    def load_bugs(self) -> list[Bug]:
        return self._load_list(BUGS_KEY, Bug.from_dict)

    def save_bugs(self, bugs: list[Bug]) -> None:
        self.store.set(BUGS_KEY, _dumps([b.to_dict() for b in bugs]))

    # ------------------------------------------------------------------
    # session
    # ------------------------------------------------------------------

    def get_current_user(self) -> User | None:
        raw = self.store.get(CURRENT_USER_KEY)
        if raw is None:
            return None
        try:
            return User.from_dict(json.loads(raw))
        except _DECODE_ERRORS as e:
            logger.error("Corrupt content under %s: %s", CURRENT_USER_KEY, e)
            raise StorageError(key=CURRENT_USER_KEY) from e

    def set_current_user(self, user: User) -> None:
        self.store.set(CURRENT_USER_KEY, _dumps(user.to_dict()))

    def clear_current_user(self) -> None:
        self.store.remove(CURRENT_USER_KEY)

    # ------------------------------------------------------------------
    # seeding
    # ------------------------------------------------------------------

    def initialize_storage(self) -> None:
        """Seed sample users and bugs into whichever collection is empty."""
        if not self.load_users():
            self.save_users(sample_users())
            logger.info("Seeded sample users")
        if not self.load_bugs():
            self.save_bugs(sample_bugs())
            logger.info("Seeded sample bugs")
