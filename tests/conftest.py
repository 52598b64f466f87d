# tests/conftest.py
import itertools

import pytest

from bugtracker.database.repositories.bugs import BugRepository
from bugtracker.database.repositories.storage import StorageAdapter
from bugtracker.database.repositories.users import UserRepository
from bugtracker.database.store import MemoryStore
from bugtracker.domain.models import Bug, BugPriority, BugStatus
from bugtracker.services.bug_service import BugService
from bugtracker.services.session_service import SessionService

FIXED_NOW = "2024-05-01T12:00:00.000Z"


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def storage(store):
    return StorageAdapter(store)


@pytest.fixture()
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture()
def user_repo(storage):
    return UserRepository(storage)


@pytest.fixture()
def bug_repo(storage):
    return BugRepository(storage)


@pytest.fixture()
def session(storage, user_repo, id_factory):
    return SessionService(storage, user_repo, id_factory=id_factory)


@pytest.fixture()
def bug_service(bug_repo, id_factory):
    return BugService(bug_repo, clock=lambda: FIXED_NOW, id_factory=id_factory)


def make_bug(bug_id: str, **overrides) -> Bug:
    fields = dict(
        id=bug_id,
        title=f"Bug {bug_id}",
        description=f"Description of {bug_id}",
        steps="1. Do it",
        priority=BugPriority.MEDIUM,
        status=BugStatus.REPORTED,
        reported_by="2",
        reported_at="2024-04-30T08:00:00.000Z",
    )
    fields.update(overrides)
    return Bug(**fields)
