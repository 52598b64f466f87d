import flet as ft
from bugtracker.config import (
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    BORDER_RADIUS_CARD,
)
from bugtracker.domain.models import Bug, BugStatus
from bugtracker.ui.helpers import priority_colors, user_label
from bugtracker.utils.time import format_distance_to_now

_STATUS_ICONS = {
    BugStatus.REPORTED: (ft.Icons.WARNING_AMBER, "#EAB308"),
    BugStatus.PROCESSING: (ft.Icons.SCHEDULE, "#3B82F6"),
    BugStatus.COMPLETED: (ft.Icons.CHECK_CIRCLE_OUTLINE, "#22C55E"),
}


class BugCard(ft.Container):
    def __init__(self, bug: Bug, user_names: dict[str, str] | None = None):
        super().__init__()
        self.bug = bug
        self.user_names = user_names or {}

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.margin.only(bottom=12)

        self.content = self._build_content()

    def _build_content(self):
        bug = self.bug
        bg, fg = priority_colors(bug.priority.value)
        icon, icon_color = _STATUS_ICONS[bug.status]

        meta_row = [
            ft.Text(
                f"Reported {format_distance_to_now(bug.reported_at)} ago"
                f" by {user_label(self.user_names, bug.reported_by)}",
                size=12,
                color=COLOR_TEXT_MUTED,
            ),
        ]
        if bug.status is BugStatus.PROCESSING and bug.verified_at:
            meta_row.append(
                ft.Text(
                    f"Verified {format_distance_to_now(bug.verified_at)} ago"
                    f" by {user_label(self.user_names, bug.verified_by)}",
                    size=12,
                    color=COLOR_TEXT_MUTED,
                )
            )
        if bug.status is BugStatus.COMPLETED and bug.completed_at:
            meta_row.append(
                ft.Text(
                    f"Completed {format_distance_to_now(bug.completed_at)} ago",
                    size=12,
                    color=COLOR_TEXT_MUTED,
                )
            )

        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(
                            bug.title,
                            weight=ft.FontWeight.BOLD,
                            size=16,
                            color=COLOR_TEXT_MAIN,
                            max_lines=1,
                            overflow=ft.TextOverflow.ELLIPSIS,
                            expand=True,
                        ),
                        ft.Container(
                            content=ft.Text(
                                bug.priority.value,
                                size=11,
                                color=fg,
                                weight=ft.FontWeight.W_500,
                            ),
                            bgcolor=bg,
                            border_radius=12,
                            padding=ft.Padding.symmetric(horizontal=10, vertical=2),
                        ),
                        ft.Icon(icon, size=20, color=icon_color),
                    ],
                    spacing=8,
                    vertical_alignment=ft.CrossAxisAlignment.START,
                ),
                ft.Text(
                    bug.description,
                    size=13,
                    color=COLOR_TEXT_MUTED,
                    max_lines=2,
                    overflow=ft.TextOverflow.ELLIPSIS,
                ),
                ft.Row(controls=meta_row, spacing=16, wrap=True),
            ],
            spacing=6,
        )
