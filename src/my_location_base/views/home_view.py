"""
Home view: dark mode switch, capture button with loading indicator, list of captured locations.
"""

from __future__ import annotations

import flet as ft

from ..services.app_state import AppState
from ..theme import SPACING_DEFAULT, PADDING_DEFAULT, apply_theme
from .formatting import location_title, location_description


def _location_tiles(state: AppState) -> list[ft.Control]:
    return [
        ft.ListTile(
            title=ft.Text(location_title(p)),
            subtitle=ft.Text(location_description(p)),
        )
        for p in state.locations
    ]


def build_home_view(page: ft.Page, state: AppState) -> ft.Control:
    """Build the single screen. Re-renders whenever AppState notifies a change."""

    switch_ref = ft.Ref[ft.Switch]()
    button_ref = ft.Ref[ft.ElevatedButton]()
    progress_ref = ft.Ref[ft.ProgressRing]()
    list_ref = ft.Ref[ft.ListView]()

    def refresh() -> None:
        apply_theme(page, state.dark_mode)
        if switch_ref.current:
            switch_ref.current.value = state.dark_mode
        if button_ref.current:
            button_ref.current.disabled = state.is_loading
        if progress_ref.current:
            progress_ref.current.visible = state.is_loading
        if list_ref.current:
            list_ref.current.controls = _location_tiles(state)
        page.update()

    async def on_toggle(_e: ft.ControlEvent) -> None:
        await state.toggle_dark_mode()

    async def on_capture(_e: ft.ControlEvent) -> None:
        await state.capture_location()

    state.add_listener(refresh)

    content = ft.Column(
        [
            ft.Row(
                [
                    ft.Text("Dark Mode"),
                    ft.Switch(ref=switch_ref, value=state.dark_mode, on_change=on_toggle),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            ft.Row(
                [
                    ft.ElevatedButton(
                        "Capture location",
                        ref=button_ref,
                        icon=ft.Icons.MAP,
                        on_click=on_capture,
                        disabled=state.is_loading,
                        expand=True,
                    ),
                    ft.ProgressRing(ref=progress_ref, width=20, height=20, visible=state.is_loading),
                ],
                spacing=SPACING_DEFAULT,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            ft.ListView(
                ref=list_ref,
                controls=_location_tiles(state),
                expand=True,
            ),
        ],
        expand=True,
        spacing=SPACING_DEFAULT,
    )

    return ft.Container(content=content, padding=PADDING_DEFAULT, expand=True)
