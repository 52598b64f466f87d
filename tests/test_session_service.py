import pytest

from bugtracker.domain.errors import ValidationError
from bugtracker.domain.models import Role
from bugtracker.services.session_service import (
    NAME_REQUIRED,
    ROLE_REQUIRED,
    validate_login,
)


class TestValidateLogin:

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_name_required(self, name):
        assert validate_login(name, "admin") == NAME_REQUIRED

    def test_name_checked_before_role(self):
        assert validate_login("", None) == NAME_REQUIRED

    @pytest.mark.parametrize("role", [None, "", "owner"])
    def test_role_required(self, role):
        assert validate_login("Alice", role) == ROLE_REQUIRED

    def test_valid(self):
        assert validate_login("Alice", Role.DEVELOPER) is None


class TestLogin:

    def test_same_name_and_role_resolve_to_same_user(self, session):
        first = session.login("Alice", "admin")
        second = session.login("Alice", "admin")
        assert first.id == second.id

    def test_name_match_is_case_insensitive(self, session):
        first = session.login("Alice", "admin")
        assert session.login("alice", "admin").id == first.id

    def test_role_is_part_of_identity(self, session):
        admin = session.login("Alice", "admin")
        dev = session.login("Alice", "developer")
        assert admin.id != dev.id
        assert dev.role is Role.DEVELOPER

    def test_new_user_is_persisted_once(self, session, storage):
        session.login("  Bob  ", "developer")
        session.login("bob", "developer")
        users = storage.load_users()
        assert [(u.name, u.role) for u in users] == [("Bob", Role.DEVELOPER)]

    def test_existing_seeded_user_is_reused(self, session, storage):
        storage.initialize_storage()
        user = session.login("dev user", "developer")
        assert user.id == "2"
        assert len(storage.load_users()) == 2

    def test_login_sets_current_session(self, session, storage):
        user = session.login("Alice", "admin")
        assert storage.get_current_user() == user

    def test_invalid_input_is_rejected_without_side_effects(self, session, storage):
        with pytest.raises(ValidationError) as exc_info:
            session.login(" ", "admin")
        assert exc_info.value.message == NAME_REQUIRED
        assert storage.load_users() == []
        assert storage.get_current_user() is None


class TestLogoutAndResume:

    def test_resume_returns_logged_in_user(self, session):
        user = session.login("Alice", "admin")
        assert session.resume_session() == user

    def test_resume_without_session(self, session):
        assert session.resume_session() is None

    def test_logout_only_clears_session(self, session, storage, bug_service):
        user = session.login("Alice", "admin")
        bug_service.report_bug("t", "d", "s", "low", user.id)

        session.logout()

        assert session.resume_session() is None
        assert storage.load_users() == [user]
        assert len(storage.load_bugs()) == 1
