"""
users.py - User repository
Single responsibility: lookup and append for the user collection.
"""
from bugtracker.database.repositories.storage import StorageAdapter
from bugtracker.domain.models import Role, User


class UserRepository:
    def __init__(self, storage: StorageAdapter):
        self.storage = storage

    def list_all(self) -> list[User]:
        return self.storage.load_users()

    def get(self, user_id: str) -> User | None:
        return next((u for u in self.storage.load_users() if u.id == user_id), None)

    def find_by_identity(self, name: str, role: Role) -> User | None:
        """Case-insensitive name, exact role."""
        wanted = name.strip().lower()
        return next(
            (
                u
                for u in self.storage.load_users()
                if u.name.lower() == wanted and u.role == role
            ),
            None,
        )

    def add(self, user: User) -> None:
        users = self.storage.load_users()
        users.append(user)
        self.storage.save_users(users)

    def names_by_id(self) -> dict[str, str]:
        return {u.id: u.name for u in self.storage.load_users()}
