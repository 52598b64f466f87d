"""
db.py - Wiring of store, repositories and services
Single responsibility: build the object graph the UI talks to.
"""
from dataclasses import dataclass

from bugtracker.database.repositories.bugs import BugRepository
from bugtracker.database.repositories.storage import StorageAdapter
from bugtracker.database.repositories.users import UserRepository
from bugtracker.database.store import KeyValueStore, SqliteStore
from bugtracker.services.bug_service import BugService
from bugtracker.services.session_service import SessionService


@dataclass
class Services:
    storage: StorageAdapter
    users: UserRepository
    bugs: BugRepository
    session: SessionService
    bug_service: BugService


def create_services(store: KeyValueStore | None = None) -> Services:
    """Default store is the SQLite file at DB_PATH."""
    storage = StorageAdapter(store if store is not None else SqliteStore())
    users = UserRepository(storage)
    bugs = BugRepository(storage)
    return Services(
        storage=storage,
        users=users,
        bugs=bugs,
        session=SessionService(storage, users),
        bug_service=BugService(bugs),
    )


def initialize_db(services: Services) -> None:
    services.storage.initialize_storage()
