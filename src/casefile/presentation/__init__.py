"""Screen projections consumed by the terminal front ends."""

from .views import SCREEN_BUILDERS, ScreenView, format_view, render_screen

__all__ = [
    "SCREEN_BUILDERS",
    "ScreenView",
    "format_view",
    "render_screen",
]
