"""
filters.py - Filter DTOs
Single responsibility: carry filter inputs for bug views.
"""
from dataclasses import dataclass
from typing import Optional

from bugtracker.domain.models import Role

ALL = "all"


@dataclass
class BugFilter:
    search_term: str = ""
    status: str = ALL
    priority: str = ALL
    # None: no visibility restriction (shared developer board)
    viewer_role: Optional[Role] = None
    viewer_id: Optional[str] = None
