import pytest

from bugtracker.domain.errors import BugNotFoundError, ValidationError
from bugtracker.domain.models import BugPriority, BugStatus, Role, User
from bugtracker.services.bug_service import (
    DESCRIPTION_REQUIRED,
    INVALID_PRIORITY,
    STEPS_REQUIRED,
    TITLE_REQUIRED,
    BugService,
    validate_report,
)
from conftest import FIXED_NOW, make_bug

DEV = User(id="dev-1", name="Dev", role=Role.DEVELOPER)


class TestValidateReport:

    @pytest.mark.parametrize(
        "title, description, steps, expected",
        [
            ("", "", "", TITLE_REQUIRED),
            ("  ", "d", "s", TITLE_REQUIRED),
            ("t", "", "", DESCRIPTION_REQUIRED),
            ("t", "d", "\n\t", STEPS_REQUIRED),
            ("t", "d", "s", None),
        ],
    )
    def test_first_missing_field_wins(self, title, description, steps, expected):
        assert validate_report(title, description, steps) == expected

    @pytest.mark.parametrize("priority", ["urgent", "", None, "HIGH"])
    def test_unknown_priority_is_rejected(self, priority):
        assert validate_report("t", "d", "s", priority) == INVALID_PRIORITY

    def test_missing_text_is_reported_before_priority(self):
        assert validate_report("", "d", "s", "urgent") == TITLE_REQUIRED


class TestReportBug:

    def test_creates_reported_bug(self, bug_service, bug_repo):
        bug_repo.add(make_bug("old"))

        bug = bug_service.report_bug(" Crash ", " It crashes ", " 1. Open ", "high", "admin-1")

        assert bug.status is BugStatus.REPORTED
        assert bug.reported_at == FIXED_NOW
        assert bug.reported_by == "admin-1"
        assert bug.priority is BugPriority.HIGH
        assert (bug.title, bug.description, bug.steps) == ("Crash", "It crashes", "1. Open")
        assert bug.verified_by is None and bug.completed_at is None
        assert bug_repo.list() == [make_bug("old"), bug]

    def test_ids_are_unique(self, bug_repo):
        service = BugService(bug_repo)
        ids = {service.report_bug("t", "d", "s", "low", "u").id for _ in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize(
        "title, description, steps, expected",
        [
            ("", "", "", TITLE_REQUIRED),
            ("t", " ", "s", DESCRIPTION_REQUIRED),
            ("t", "d", "", STEPS_REQUIRED),
        ],
    )
    def test_invalid_report_never_mutates(self, bug_service, store, title, description, steps, expected):
        with pytest.raises(ValidationError) as exc_info:
            bug_service.report_bug(title, description, steps, "medium", "u")
        assert exc_info.value.message == expected
        assert store.data == {}

    def test_unknown_priority_raises_validation_error(self, bug_service, store):
        with pytest.raises(ValidationError) as exc_info:
            bug_service.report_bug("t", "d", "s", "urgent", "u")
        assert exc_info.value.message == INVALID_PRIORITY
        assert store.data == {}


class TestMoveBug:

    def test_move_to_processing_stamps_verifier(self, bug_service, bug_repo):
        bug_repo.add(make_bug("1"))
        moved = bug_service.move_bug("1", BugStatus.PROCESSING, DEV)
        assert moved.verified_by == "dev-1"
        assert moved.verified_at == FIXED_NOW
        assert bug_repo.get("1") == moved

    def test_full_lifecycle(self, bug_repo):
        times = iter(["t1", "t2", "t3"])
        service = BugService(bug_repo, clock=lambda: next(times))
        bug_repo.add(make_bug("1"))

        service.move_bug("1", "processing", DEV)
        service.move_bug("1", "completed", User(id="dev-2", name="Other", role=Role.DEVELOPER))
        final = service.move_bug("1", "completed", DEV)

        assert final.status is BugStatus.COMPLETED
        assert (final.verified_by, final.verified_at) == ("dev-1", "t1")
        assert final.completed_at == "t2"

    def test_move_missing_bug(self, bug_service):
        with pytest.raises(BugNotFoundError):
            bug_service.move_bug("nope", BugStatus.COMPLETED, DEV)

    def test_delete_bug(self, bug_service, bug_repo):
        bug_repo.add(make_bug("1"))
        assert bug_service.delete_bug("1") is True
        assert bug_service.list_bugs() == []
