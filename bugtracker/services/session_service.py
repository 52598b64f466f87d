"""
session_service.py - Session / identity resolution
Single responsibility: resolve users by name+role and keep the active session.
"""
import logging
from typing import Callable

from bugtracker.database.repositories.storage import StorageAdapter
from bugtracker.database.repositories.users import UserRepository
from bugtracker.domain.errors import ValidationError
from bugtracker.domain.models import Role, User
from bugtracker.utils.ids import new_id

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Please enter your name"
ROLE_REQUIRED = "Please select a role"


def validate_login(name: str | None, role: Role | str | None) -> str | None:
    """Return the message to show for the first invalid field, or None."""
    if not (name or "").strip():
        return NAME_REQUIRED
    if not role:
        return ROLE_REQUIRED
    try:
        Role(role)
    except ValueError:
        return ROLE_REQUIRED
    return None


class SessionService:
    def __init__(
        self,
        storage: StorageAdapter,
        users: UserRepository,
        id_factory: Callable[[], str] = new_id,
    ):
        self.storage = storage
        self.users = users
        self.id_factory = id_factory

    def login(self, name: str, role: Role | str) -> User:
        error = validate_login(name, role)
        if error:
            raise ValidationError(error)
        role = Role(role)
        name = name.strip()

        user = self.users.find_by_identity(name, role)
        if user is None:
            user = User(id=self.id_factory(), name=name, role=role)
            self.users.add(user)
            logger.info("Created user %s (%s)", user.name, user.role.value)
        self.storage.set_current_user(user)
        logger.info("Logged in as %s (%s)", user.name, user.role.value)
        return user

    def logout(self) -> None:
        self.storage.clear_current_user()
        logger.info("Logged out")

    def resume_session(self) -> User | None:
        return self.storage.get_current_user()
