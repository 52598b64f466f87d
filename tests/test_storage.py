import json

import pytest

from bugtracker.config import BUGS_KEY, CURRENT_USER_KEY, USERS_KEY
from bugtracker.domain.errors import StorageError
from bugtracker.domain.models import BugStatus, Role, User
from conftest import make_bug


class TestDefaults:

    def test_absent_keys_load_as_empty(self, storage):
        assert storage.load_users() == []
        assert storage.load_bugs() == []
        assert storage.get_current_user() is None


class TestSerialization:

    def test_bug_wire_format_uses_camel_case_and_omits_unset(self, storage, store):
        storage.save_bugs([make_bug("1")])
        record = json.loads(store.get(BUGS_KEY))[0]
        assert record["reportedBy"] == "2"
        assert record["reportedAt"] == "2024-04-30T08:00:00.000Z"
        assert record["status"] == "reported"
        assert "verifiedBy" not in record
        assert "completedAt" not in record

    def test_save_of_load_is_a_fixed_point(self, storage, store):
        storage.save_bugs(
            [
                make_bug("1"),
                make_bug(
                    "2",
                    status=BugStatus.PROCESSING,
                    verified_by="1",
                    verified_at="2024-05-01T00:00:00.000Z",
                    description="Ünïcode ✓",
                ),
            ]
        )
        storage.save_users([User(id="1", name="Admin User", role=Role.ADMIN)])
        bugs_before = store.get(BUGS_KEY)
        users_before = store.get(USERS_KEY)

        storage.save_bugs(storage.load_bugs())
        storage.save_users(storage.load_users())

        assert store.get(BUGS_KEY) == bugs_before
        assert store.get(USERS_KEY) == users_before

    def test_reads_records_written_by_older_clients(self, storage, store):
        store.set(
            BUGS_KEY,
            json.dumps(
                [
                    {
                        "id": 17,
                        "title": "t",
                        "description": "d",
                        "steps": "s",
                        "priority": "critical",
                        "status": "completed",
                        "reportedBy": "2",
                        "reportedAt": "2024-01-01T00:00:00.000Z",
                        "completedAt": "2024-01-02T00:00:00.000Z",
                    }
                ]
            ),
        )
        bug = storage.load_bugs()[0]
        assert bug.id == "17"
        assert bug.completed_at == "2024-01-02T00:00:00.000Z"
        assert bug.verified_by is None


class TestCorruptContent:

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            '{"id": "1"}',
            '[{"id": "1", "title": "missing fields"}]',
            '[{"id": "1", "title": "t", "description": "d", "steps": "s",'
            ' "priority": "urgent", "status": "reported",'
            ' "reportedBy": "2", "reportedAt": "x"}]',
            "[1, 2, 3]",
            '[{"id": "1", "title": 5, "description": "d", "steps": "s",'
            ' "priority": "low", "status": "reported",'
            ' "reportedBy": "2", "reportedAt": "x"}]',
            '[{"id": "1", "title": "t", "description": "d", "steps": "s",'
            ' "priority": "low", "status": "processing",'
            ' "reportedBy": "2", "reportedAt": "x", "verifiedBy": 1}]',
            '[{"id": null, "title": "t", "description": "d", "steps": "s",'
            ' "priority": "low", "status": "reported",'
            ' "reportedBy": "2", "reportedAt": "x"}]',
        ],
    )
    def test_corrupt_bugs_raise_storage_error(self, storage, store, raw):
        store.set(BUGS_KEY, raw)
        with pytest.raises(StorageError) as exc_info:
            storage.load_bugs()
        assert exc_info.value.key == BUGS_KEY

    @pytest.mark.parametrize(
        "raw",
        [
            '[{"id": "1", "name": null, "role": "admin"}]',
            '[{"id": "1", "name": 7, "role": "admin"}]',
            '[{"id": "1", "role": "admin"}]',
        ],
    )
    def test_corrupt_users_raise_storage_error(self, storage, store, raw):
        store.set(USERS_KEY, raw)
        with pytest.raises(StorageError) as exc_info:
            storage.load_users()
        assert exc_info.value.key == USERS_KEY

    def test_login_over_corrupt_users_is_aborted(self, session, store):
        raw = '[{"id": "1", "name": null, "role": "admin"}]'
        store.set(USERS_KEY, raw)
        with pytest.raises(StorageError):
            session.login("Alice", "admin")
        assert store.get(USERS_KEY) == raw
        assert store.get(CURRENT_USER_KEY) is None

    def test_view_never_sees_mistyped_bugs(self, bug_service, store):
        store.set(
            BUGS_KEY,
            '[{"id": "1", "title": 5, "description": "d", "steps": "s",'
            ' "priority": "low", "status": "reported",'
            ' "reportedBy": "2", "reportedAt": "x"}]',
        )
        with pytest.raises(StorageError):
            bug_service.list_bugs()

    def test_failed_read_aborts_mutation_and_keeps_content(self, bug_repo, store):
        store.set(BUGS_KEY, "{not json")
        with pytest.raises(StorageError):
            bug_repo.add(make_bug("1"))
        assert store.get(BUGS_KEY) == "{not json"

    def test_corrupt_session_raises(self, storage, store):
        store.set(CURRENT_USER_KEY, '{"id": "1", "name": "x", "role": "owner"}')
        with pytest.raises(StorageError):
            storage.get_current_user()


class TestSession:

    def test_set_and_clear_current_user(self, storage, store):
        user = User(id="9", name="Ann", role=Role.DEVELOPER)
        storage.set_current_user(user)
        assert storage.get_current_user() == user

        storage.clear_current_user()
        assert storage.get_current_user() is None
        assert store.get(CURRENT_USER_KEY) is None


class TestInitializeStorage:

    def test_seeds_empty_store(self, storage):
        storage.initialize_storage()
        users = storage.load_users()
        bugs = storage.load_bugs()
        assert [(u.id, u.name, u.role) for u in users] == [
            ("1", "Admin User", Role.ADMIN),
            ("2", "Dev User", Role.DEVELOPER),
        ]
        assert [b.status for b in bugs] == [
            BugStatus.REPORTED,
            BugStatus.PROCESSING,
            BugStatus.COMPLETED,
        ]
        assert bugs[1].verified_by == "1"
        assert bugs[2].completed_at is not None

    def test_is_idempotent(self, storage, store):
        storage.initialize_storage()
        snapshot = dict(store.data)
        storage.initialize_storage()
        assert store.data == snapshot

    def test_never_overwrites_non_empty_collections(self, storage):
        mine = User(id="u1", name="Only Me", role=Role.ADMIN)
        storage.save_users([mine])
        storage.initialize_storage()
        assert storage.load_users() == [mine]
        # bugs were empty, so they still get seeded
        assert len(storage.load_bugs()) == 3

    def test_seeds_users_when_only_bugs_exist(self, storage):
        storage.save_bugs([make_bug("x")])
        storage.initialize_storage()
        assert [b.id for b in storage.load_bugs()] == ["x"]
        assert len(storage.load_users()) == 2
