"""Rendering helpers for the orbit canvas."""

from .assets import FontBook, get_text_surface, load_font
from .draw import (
    draw_background,
    draw_body,
    draw_explosion,
    draw_spawn_marker,
)

__all__ = [
    "FontBook",
    "draw_background",
    "draw_body",
    "draw_explosion",
    "draw_spawn_marker",
    "get_text_surface",
    "load_font",
]
