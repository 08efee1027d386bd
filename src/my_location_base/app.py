"""
Main Flet application: single screen with theme toggle and location capture.
"""

from __future__ import annotations

import logging

import flet as ft

from .config import Settings
from .logging_config import setup_logging
from .services.app_state import AppState
from .services.location_provider import provider_from_settings
from .theme import apply_theme
from .views.home_view import build_home_view

logger = logging.getLogger(__name__)

APP_TITLE = "My Location BASE"


def _show_alert(page: ft.Page, message: str) -> None:
    dialog = ft.AlertDialog(
        title=ft.Text(APP_TITLE),
        content=ft.Text(message),
        actions=[ft.TextButton("OK", on_click=lambda e: _close_dialog(page, dialog))],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def _close_dialog(page: ft.Page, dialog: ft.AlertDialog) -> None:
    dialog.open = False
    page.update()


def make_main(settings: Settings):
    """Return the async flet target bound to settings."""

    async def main(page: ft.Page) -> None:
        page.title = APP_TITLE
        apply_theme(page, dark=False)
        page.appbar = ft.AppBar(title=ft.Text(APP_TITLE))

        provider = provider_from_settings(settings.fixed_position, settings.gps_timeout)
        state = await AppState.open(settings, provider, on_alert=lambda msg: _show_alert(page, msg))

        async def on_disconnect(_e: ft.ControlEvent) -> None:
            logger.debug("Session closed; closing database")
            await state.close()

        page.on_disconnect = on_disconnect

        page.add(build_home_view(page, state))
        await state.load()

    return main


def run_app(settings: Settings | None = None) -> None:
    settings = settings or Settings.from_env()
    settings.ensure_data_dir()
    setup_logging(settings)
    logger.info("Starting %s (data dir %s)", APP_TITLE, settings.data_dir)
    ft.app(target=make_main(settings))
