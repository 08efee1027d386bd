"""
Light and dark Material 3 themes. The dark-mode switch picks which one the page uses.
"""

import flet as ft


# --- Light palette ---
LIGHT_PRIMARY = "#2e6b4f"                # Forest green (button, switch)
LIGHT_ON_PRIMARY = "#ffffff"
LIGHT_PRIMARY_CONTAINER = "#b1f1cf"
LIGHT_ON_PRIMARY_CONTAINER = "#002114"
LIGHT_BACKGROUND = "#f6fbf4"
LIGHT_SURFACE = "#f6fbf4"
LIGHT_ON_SURFACE = "#171d1a"
LIGHT_ON_SURFACE_VARIANT = "#404943"
LIGHT_OUTLINE = "#707973"

# --- Dark palette ---
DARK_PRIMARY = "#95d5b3"
DARK_ON_PRIMARY = "#003824"
DARK_PRIMARY_CONTAINER = "#115238"
DARK_ON_PRIMARY_CONTAINER = "#b1f1cf"
DARK_BACKGROUND = "#0f1512"
DARK_SURFACE = "#0f1512"
DARK_ON_SURFACE = "#dee4df"
DARK_ON_SURFACE_VARIANT = "#bfc9c1"
DARK_OUTLINE = "#89938c"

COLOR_ERROR = "#ba1a1a"

# Layout
SPACING_DEFAULT = 8
PADDING_DEFAULT = 10


def _color_scheme(dark: bool) -> ft.ColorScheme:
    if dark:
        return ft.ColorScheme(
            primary=DARK_PRIMARY,
            on_primary=DARK_ON_PRIMARY,
            primary_container=DARK_PRIMARY_CONTAINER,
            on_primary_container=DARK_ON_PRIMARY_CONTAINER,
            surface=DARK_SURFACE,
            on_surface=DARK_ON_SURFACE,
            on_surface_variant=DARK_ON_SURFACE_VARIANT,
            outline=DARK_OUTLINE,
            error=COLOR_ERROR,
        )
    return ft.ColorScheme(
        primary=LIGHT_PRIMARY,
        on_primary=LIGHT_ON_PRIMARY,
        primary_container=LIGHT_PRIMARY_CONTAINER,
        on_primary_container=LIGHT_ON_PRIMARY_CONTAINER,
        surface=LIGHT_SURFACE,
        on_surface=LIGHT_ON_SURFACE,
        on_surface_variant=LIGHT_ON_SURFACE_VARIANT,
        outline=LIGHT_OUTLINE,
        error=COLOR_ERROR,
    )


def light_theme() -> ft.Theme:
    return ft.Theme(color_scheme=_color_scheme(False), use_material3=True)


def dark_theme() -> ft.Theme:
    return ft.Theme(color_scheme=_color_scheme(True), use_material3=True)


def background_color(dark: bool) -> str:
    return DARK_BACKGROUND if dark else LIGHT_BACKGROUND


def apply_theme(page: ft.Page, dark: bool) -> None:
    """Install both themes and switch the page to the requested mode."""
    page.theme = light_theme()
    page.dark_theme = dark_theme()
    page.theme_mode = ft.ThemeMode.DARK if dark else ft.ThemeMode.LIGHT
    page.bgcolor = background_color(dark)
