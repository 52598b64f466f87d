"""
app_main.py - Bug Tracker メインアプリケーション
Bug Tracker v1.0
"""

import logging

import flet as ft

from bugtracker.config import (
    ADMIN_REFRESH_SECONDS,
    APP_TITLE,
    COLOR_BG,
    COLOR_PRIMARY,
    DEVELOPER_REFRESH_SECONDS,
)
from bugtracker.db import Services, create_services, initialize_db
from bugtracker.domain.errors import BugTrackerError, StorageError
from bugtracker.domain.models import User
from bugtracker.domain.roles import capabilities_for
from bugtracker.ui import actions, views
from bugtracker.ui_state import AppState
from bugtracker.utils.polling import PollingRefresher

logger = logging.getLogger(__name__)


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page, services: Services | None = None):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    refresher: PollingRefresher | None = None

    def stop_refresher():
        nonlocal refresher
        state.cancel_success_timer()
        if refresher is not None:
            refresher.stop()
            refresher = None

    def show_login():
        stop_refresher()
        page.views.clear()
        page.views.append(views.build_login_view(page, services, on_login=show_dashboard))
        page.update()

    def logout():
        try:
            services.session.logout()
        except StorageError as exc:
            logger.exception("Failed to clear session")
            actions.show_storage_error(page, exc)
        state.user = None
        state.reset_filters()
        show_login()

    def show_dashboard(user: User):
        nonlocal refresher
        stop_refresher()
        state.user = user
        try:
            if capabilities_for(user.role).dashboard == "board":
                view, reload = views.build_developer_view(page, state, services, user, logout)
                interval = DEVELOPER_REFRESH_SECONDS
            else:
                view, reload = views.build_admin_view(page, state, services, user, logout)
                interval = ADMIN_REFRESH_SECONDS
        except BugTrackerError as exc:
            logger.exception("Error building dashboard")
            actions.show_storage_error(page, exc)
            return
        page.views.clear()
        page.views.append(view)
        page.update()
        refresher = PollingRefresher(interval, reload, name=f"{user.role.value}-refresh")
        refresher.start()

    async def on_window_event(e: ft.WindowEvent):
        if e.type == ft.WindowEventType.CLOSE:
            logger.debug("Window close event")
            stop_refresher()
            page.window.prevent_close = False
            await page.window.close()

    page.window.prevent_close = True
    page.window.on_event = on_window_event
    page.on_disconnect = lambda _e: stop_refresher()

    try:
        if services is None:
            services = create_services()
        initialize_db(services)
        user = services.session.resume_session()
    except StorageError as exc:
        logger.exception("Failed to initialize storage")
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Storage initialization error"),
                content=ft.Text(f"The local data store could not be opened.\nDetails: {exc}"),
                open=True,
            )
        )
        page.update()
        return

    if user is not None:
        logger.info("Resuming session for %s", user.name)
        show_dashboard(user)
    else:
        show_login()


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
