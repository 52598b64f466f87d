"""
roles.py - Role capabilities
Single responsibility: map each role to what it may see and do.
"""
from dataclasses import dataclass

from bugtracker.domain.models import Role


@dataclass(frozen=True)
class RoleCapabilities:
    can_see_all_bugs: bool
    can_report_bugs: bool
    can_move_bugs: bool
    dashboard: str  # "reports" | "board"


ROLE_CAPABILITIES: dict[Role, RoleCapabilities] = {
    Role.ADMIN: RoleCapabilities(
        can_see_all_bugs=True,
        can_report_bugs=True,
        can_move_bugs=False,
        dashboard="reports",
    ),
    Role.DEVELOPER: RoleCapabilities(
        can_see_all_bugs=False,
        can_report_bugs=False,
        can_move_bugs=True,
        dashboard="board",
    ),
}


def capabilities_for(role: Role | str) -> RoleCapabilities:
    return ROLE_CAPABILITIES[Role(role)]
