"""
filter_service.py - Filtering and grouping of bug views
Single responsibility: build BugFilter values and apply them to collections.
"""
from bugtracker.domain.filters import ALL, BugFilter
from bugtracker.domain.models import Bug, BugStatus, Role
from bugtracker.domain.roles import capabilities_for


def build_filter(
    search_term: str = "",
    status: str = ALL,
    priority: str = ALL,
    viewer_role: Role | str | None = None,
    viewer_id: str | None = None,
) -> BugFilter:
    return BugFilter(
        search_term=search_term or "",
        status=status or ALL,
        priority=priority or ALL,
        viewer_role=Role(viewer_role) if viewer_role else None,
        viewer_id=viewer_id,
    )


def is_visible(bug: Bug, flt: BugFilter) -> bool:
    if flt.viewer_role is None or capabilities_for(flt.viewer_role).can_see_all_bugs:
        return True
    return bug.reported_by == flt.viewer_id


def matches(bug: Bug, flt: BugFilter) -> bool:
    term = flt.search_term.lower()
    if term and term not in bug.title.lower() and term not in bug.description.lower():
        return False
    if flt.status != ALL and bug.status.value != flt.status:
        return False
    if flt.priority != ALL and bug.priority.value != flt.priority:
        return False
    return True


def view(bugs: list[Bug], flt: BugFilter) -> list[Bug]:
    """Visible bugs matching the filter, in stored order."""
    return [b for b in bugs if is_visible(b, flt) and matches(b, flt)]


def group_by_status(bugs: list[Bug]) -> dict[BugStatus, list[Bug]]:
    groups: dict[BugStatus, list[Bug]] = {status: [] for status in BugStatus}
    for bug in bugs:
        groups[bug.status].append(bug)
    return groups
