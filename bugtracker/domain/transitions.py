"""
transitions.py - Bug status workflow
Single responsibility: allowed status moves and lifecycle stamping.
"""
from bugtracker.domain.errors import InvalidTransitionError
from bugtracker.domain.models import Bug, BugStatus
from bugtracker.utils.time import now_iso

# Board columns accept any card, including drops back onto the same column.
TRANSITIONS: dict[BugStatus, frozenset[BugStatus]] = {
    BugStatus.REPORTED: frozenset(BugStatus),
    BugStatus.PROCESSING: frozenset(BugStatus),
    BugStatus.COMPLETED: frozenset(BugStatus),
}


def can_transition(current: BugStatus, target: BugStatus) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def apply_transition(
    bug: Bug,
    new_status: BugStatus | str,
    acting_user_id: str,
    now: str | None = None,
) -> Bug:
    """
    Return a copy of ``bug`` moved to ``new_status``.

    verified_by/verified_at are stamped the first time the bug reaches
    PROCESSING and completed_at the first time it reaches COMPLETED; later
    moves never overwrite them.
    """
    try:
        target = BugStatus(new_status)
    except ValueError:
        raise InvalidTransitionError(bug.status, new_status) from None
    if not can_transition(bug.status, target):
        raise InvalidTransitionError(bug.status, target)

    stamp = now or now_iso()
    changes: dict = {"status": target}
    if target is BugStatus.PROCESSING and not bug.verified_by:
        changes["verified_by"] = acting_user_id
        changes["verified_at"] = stamp
    if target is BugStatus.COMPLETED and not bug.completed_at:
        changes["completed_at"] = stamp
    return bug.evolve(**changes)
