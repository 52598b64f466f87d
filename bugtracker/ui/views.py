"""
views.py - UI view builders (login / admin dashboard / developer board)
Single responsibility: build flet Views using provided callbacks/state.
"""

import logging
from typing import Callable

import flet as ft

from bugtracker.config import (
    APP_TITLE,
    COLOR_BG,
    COLOR_CARD,
    COLOR_BORDER,
    COLOR_TEXT_MUTED,
    COLOR_TEXT_MAIN,
    COLOR_PRIMARY,
    COLOR_DANGER,
    COLOR_SUCCESS,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    BORDER_RADIUS_CARD,
    BORDER_RADIUS_BTN,
    SHADOW_ELEVATION,
    BOARD_COLUMN_MIN_HEIGHT,
    SUCCESS_MESSAGE_SECONDS,
)
from bugtracker.db import Services
from bugtracker.domain.errors import StorageError
from bugtracker.domain.filters import ALL
from bugtracker.domain.models import Bug, BugPriority, BugStatus, Role, User
from bugtracker.services import filter_service
from bugtracker.services.bug_service import REPORT_SUCCESS
from bugtracker.ui import actions
from bugtracker.ui.components.bug_card import BugCard
from bugtracker.ui.helpers import status_colors
from bugtracker.ui_state import AppState

logger = logging.getLogger(__name__)

BOARD_GROUP = "bugs"

_STATUS_TITLES = {
    BugStatus.REPORTED: "Reported Bugs",
    BugStatus.PROCESSING: "Bugs In Processing",
    BugStatus.COMPLETED: "Completed Bugs",
}

_BOARD_TITLES = {
    BugStatus.REPORTED: "Reported",
    BugStatus.PROCESSING: "Processing",
    BugStatus.COMPLETED: "Completed",
}

# (view, reload); reload is driven by the polling refresher
DashboardBuild = tuple[ft.View, Callable[[], None]]


def _panel(content: ft.Control, **kwargs) -> ft.Container:
    return ft.Container(
        content=content,
        padding=ft.Padding.all(16),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        shadow=ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        ),
        **kwargs,
    )


def _message_box(text: str, color: str) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, color=color),
        bgcolor=ft.Colors.with_opacity(0.08, color),
        border=ft.border.only(left=ft.BorderSide(4, color)),
        padding=ft.Padding.all(12),
        visible=bool(text),
    )


def _empty_placeholder(text: str) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, color=COLOR_TEXT_MUTED, size=14),
        alignment=ft.Alignment.CENTER,
        padding=32,
    )


def build_appbar(user: User, on_logout) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(
                    f"{user.name} ({user.role.value})",
                    color=COLOR_TEXT_MAIN,
                    size=14,
                    weight=ft.FontWeight.W_500,
                ),
                alignment=ft.Alignment.CENTER_LEFT,
            ),
            ft.Container(
                content=ft.TextButton(
                    "Logout", icon=ft.Icons.LOGOUT, on_click=lambda e: on_logout()
                ),
                padding=ft.Padding.only(left=12, right=24),
            ),
        ],
    )


def _search_field(state: AppState, on_change) -> ft.TextField:
    def handle(e):
        state.search_term = e.control.value or ""
        on_change()

    return ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text="Search bugs...",
        value=state.search_term,
        on_change=handle,
        border_radius=BORDER_RADIUS_BTN,
        border_color=COLOR_BORDER,
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
        expand=True,
    )


# ==========================================================================
# Login
# ==========================================================================


def build_login_view(page: ft.Page, services: Services, on_login: Callable[[User], None]) -> ft.View:
    name_field = ft.TextField(
        label="Your Name",
        hint_text="Enter your name",
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        autofocus=True,
    )
    role_group = ft.RadioGroup(
        content=ft.Row(
            [
                ft.Radio(value=Role.DEVELOPER.value, label="Developer"),
                ft.Radio(value=Role.ADMIN.value, label="Admin"),
            ],
            alignment=ft.MainAxisAlignment.SPACE_EVENLY,
        )
    )
    error_box = _message_box("", COLOR_DANGER)

    def handle_submit(_e):
        user, error = actions.submit_login(page, services, name_field.value or "", role_group.value)
        if user is None:
            error_box.content.value = error
            error_box.visible = bool(error)
            page.update()
            return
        on_login(user)

    name_field.on_submit = handle_submit

    form = _panel(
        ft.Column(
            controls=[
                ft.Row(
                    [ft.Icon(ft.Icons.BUG_REPORT, size=64, color=COLOR_PRIMARY)],
                    alignment=ft.MainAxisAlignment.CENTER,
                ),
                ft.Text(
                    APP_TITLE,
                    size=28,
                    weight=ft.FontWeight.BOLD,
                    color=COLOR_TEXT_MAIN,
                    text_align=ft.TextAlign.CENTER,
                ),
                ft.Text(
                    "Sign in to continue",
                    size=13,
                    color=COLOR_TEXT_MUTED,
                    text_align=ft.TextAlign.CENTER,
                ),
                error_box,
                name_field,
                ft.Text("Select Role", size=13, color=COLOR_TEXT_MAIN),
                role_group,
                ft.FilledButton(
                    "Sign in",
                    style=ft.ButtonStyle(
                        bgcolor=COLOR_PRIMARY,
                        color="white",
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=handle_submit,
                ),
            ],
            spacing=16,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        ),
        width=420,
    )

    return ft.View(
        route="/login",
        bgcolor=COLOR_BG,
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[form],
    )


# ==========================================================================
# Admin dashboard: report form + lists by status
# ==========================================================================


def _build_report_form(page: ft.Page, state: AppState, services: Services, user: User, on_submitted) -> ft.Container:
    def text_field(label: str, hint: str, lines: int = 1) -> ft.TextField:
        return ft.TextField(
            label=label,
            hint_text=hint,
            multiline=lines > 1,
            min_lines=lines,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
        )

    title_field = text_field("Bug Title *", "Concise description of the bug")
    description_field = text_field("Description *", "Detailed description of the bug", 3)
    steps_field = text_field(
        "Steps to Reproduce *", "1. Go to page X\n2. Click on Y\n3. Observe error", 4
    )
    priority_group = ft.RadioGroup(
        value=state.form_priority,
        content=ft.Row(
            [ft.Radio(value=p.value, label=p.value.capitalize()) for p in BugPriority],
            wrap=True,
        ),
    )
    error_box = _message_box("", COLOR_DANGER)
    success_box = _message_box("", COLOR_SUCCESS)

    def set_message(box: ft.Container, text: str) -> None:
        box.content.value = text
        box.visible = bool(text)

    def clear_success():
        set_message(success_box, "")
        page.update()

    def handle_submit(_e):
        set_message(error_box, "")
        set_message(success_box, "")
        bug, error = actions.submit_report(
            page,
            services,
            user,
            title_field.value or "",
            description_field.value or "",
            steps_field.value or "",
            priority_group.value or BugPriority.MEDIUM.value,
        )
        if bug is None:
            set_message(error_box, error)
            page.update()
            return
        title_field.value = ""
        description_field.value = ""
        steps_field.value = ""
        priority_group.value = BugPriority.MEDIUM.value
        set_message(success_box, REPORT_SUCCESS)
        on_submitted(bug)
        page.update()
        state.schedule_success_clear(SUCCESS_MESSAGE_SECONDS, clear_success)

    return _panel(
        ft.Column(
            controls=[
                ft.Text("Report a New Bug", size=20, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                error_box,
                success_box,
                title_field,
                description_field,
                steps_field,
                ft.Text("Priority", size=13, color=COLOR_TEXT_MAIN),
                priority_group,
                ft.FilledButton(
                    "Submit Bug Report",
                    style=ft.ButtonStyle(
                        bgcolor=COLOR_PRIMARY,
                        color="white",
                        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                    ),
                    on_click=handle_submit,
                ),
            ],
            spacing=12,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        )
    )


def build_admin_view(page: ft.Page, state: AppState, services: Services, user: User, on_logout) -> DashboardBuild:
    bugs: list[Bug] = []
    user_names: dict[str, str] = {}
    sections = {status: ft.Column(spacing=0) for status in BugStatus}
    section_titles = {status: ft.Text(_STATUS_TITLES[status], size=18, weight=ft.FontWeight.BOLD) for status in BugStatus}

    def render():
        flt = filter_service.build_filter(
            search_term=state.search_term,
            status=state.status_filter,
            viewer_role=user.role,
            viewer_id=user.id,
        )
        groups = filter_service.group_by_status(filter_service.view(bugs, flt))
        for status, column in sections.items():
            items = groups[status]
            column.controls = (
                [BugCard(bug, user_names) for bug in items]
                if items
                else [_empty_placeholder("No bugs to display")]
            )

    def load():
        nonlocal bugs, user_names
        bugs = services.bug_service.list_bugs()
        user_names = services.users.names_by_id()

    def reload():
        try:
            load()
        except StorageError as exc:
            logger.exception("Failed to load bugs")
            actions.show_storage_error(page, exc)
            return
        render()
        page.update()

    def on_filter_change():
        render()
        page.update()

    def on_status_select(e):
        state.status_filter = e.control.value or ALL
        on_filter_change()

    def on_submitted(bug: Bug):
        bugs.append(bug)
        render()

    status_dropdown = ft.Dropdown(
        value=state.status_filter,
        options=[ft.dropdown.Option(key=ALL, text="All Statuses")]
        + [ft.dropdown.Option(key=s.value, text=s.value.capitalize()) for s in BugStatus],
        on_change=on_status_select,
        border_color=COLOR_BORDER,
        border_radius=BORDER_RADIUS_BTN,
        width=200,
    )

    filters = _panel(ft.Row([_search_field(state, on_filter_change), status_dropdown], spacing=12))
    lists = ft.Column(
        controls=[
            filters,
            *[
                _panel(ft.Column([section_titles[status], sections[status]], spacing=12))
                for status in BugStatus
            ],
        ],
        spacing=16,
    )

    layout = ft.ResponsiveRow(
        controls=[
            ft.Container(
                content=_build_report_form(page, state, services, user, on_submitted),
                col={"xs": 12, "md": 4},
            ),
            ft.Container(content=lists, col={"xs": 12, "md": 8}),
        ],
        spacing=24,
        run_spacing=24,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    try:
        load()
    except StorageError as exc:
        logger.exception("Failed to load bugs")
        actions.show_storage_error(page, exc)
    render()

    view = ft.View(
        route="/admin",
        appbar=build_appbar(user, on_logout),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[layout],
    )
    return view, reload


# ==========================================================================
# Developer dashboard: drag-and-drop board
# ==========================================================================


def build_developer_view(page: ft.Page, state: AppState, services: Services, user: User, on_logout) -> DashboardBuild:
    bugs: list[Bug] = []
    user_names: dict[str, str] = {}
    columns = {status: ft.Column(spacing=0, scroll=ft.ScrollMode.AUTO, expand=True) for status in BugStatus}
    counts = {status: ft.Text("0", size=12, weight=ft.FontWeight.W_500) for status in BugStatus}
    targets: dict[BugStatus, ft.Container] = {}

    def render():
        # board shows every bug regardless of reporter
        flt = filter_service.build_filter(search_term=state.search_term, priority=state.priority_filter)
        groups = filter_service.group_by_status(filter_service.view(bugs, flt))
        for status, column in columns.items():
            items = groups[status]
            counts[status].value = str(len(items))
            column.controls = (
                [
                    ft.Draggable(
                        group=BOARD_GROUP,
                        content=BugCard(bug, user_names),
                        content_feedback=ft.Container(
                            content=ft.Text(bug.title, color=COLOR_TEXT_MAIN),
                            padding=ft.Padding.all(8),
                            bgcolor=COLOR_CARD,
                            border_radius=BORDER_RADIUS_BTN,
                        ),
                        data=bug.id,
                    )
                    for bug in items
                ]
                if items
                else [_empty_placeholder("Drag bugs here")]
            )

    def load():
        nonlocal bugs, user_names
        bugs = services.bug_service.list_bugs()
        user_names = services.users.names_by_id()

    def reload():
        try:
            load()
        except StorageError as exc:
            logger.exception("Failed to load bugs")
            actions.show_storage_error(page, exc)
            return
        render()
        page.update()

    def on_filter_change():
        render()
        page.update()

    def on_priority_select(e):
        state.priority_filter = e.control.value or ALL
        on_filter_change()

    def highlight(status: BugStatus, on: bool):
        targets[status].border = ft.border.all(2, COLOR_PRIMARY if on else "transparent")
        page.update()

    def make_accept(status: BugStatus):
        def on_accept(e):
            highlight(status, False)
            src = getattr(e, "src", None) or page.get_control(e.src_id)
            bug_id = getattr(src, "data", None)
            if not bug_id:
                return
            if actions.move_bug(page, services, user, bug_id, status) is not None:
                reload()

        return on_accept

    def build_column(status: BugStatus) -> ft.DragTarget:
        bg, fg = status_colors(status.value)
        counts[status].color = fg
        container = _panel(
            ft.Column(
                controls=[
                    ft.Row(
                        controls=[
                            ft.Text(_BOARD_TITLES[status], size=18, weight=ft.FontWeight.W_500, color=COLOR_TEXT_MAIN),
                            ft.Container(
                                content=counts[status],
                                bgcolor=bg,
                                border_radius=12,
                                padding=ft.Padding.symmetric(horizontal=10, vertical=2),
                            ),
                        ],
                        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                    ),
                    ft.Divider(height=1, color=COLOR_BORDER),
                    columns[status],
                ],
                spacing=12,
                expand=True,
            ),
            height=BOARD_COLUMN_MIN_HEIGHT + 200,
            border=ft.border.all(2, "transparent"),
        )
        targets[status] = container
        return ft.DragTarget(
            group=BOARD_GROUP,
            content=container,
            on_accept=make_accept(status),
            on_will_accept=lambda e, s=status: highlight(s, True),
            on_leave=lambda e, s=status: highlight(s, False),
        )

    priority_dropdown = ft.Dropdown(
        value=state.priority_filter,
        options=[ft.dropdown.Option(key=ALL, text="All Priorities")]
        + [ft.dropdown.Option(key=p.value, text=p.value.capitalize()) for p in BugPriority],
        on_change=on_priority_select,
        border_color=COLOR_BORDER,
        border_radius=BORDER_RADIUS_BTN,
        width=200,
    )

    board = ft.ResponsiveRow(
        controls=[ft.Container(content=build_column(s), col={"xs": 12, "md": 4}) for s in BugStatus],
        spacing=24,
        run_spacing=24,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    try:
        load()
    except StorageError as exc:
        logger.exception("Failed to load bugs")
        actions.show_storage_error(page, exc)
    render()

    view = ft.View(
        route="/developer",
        appbar=build_appbar(user, on_logout),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Text("Bug Board", size=24, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            _panel(ft.Row([_search_field(state, on_filter_change), priority_dropdown], spacing=12)),
            ft.Container(height=8),
            board,
        ],
    )
    return view, reload
