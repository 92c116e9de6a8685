"""UI module."""

from .panel_builder import Page, calculate_visible_range, format_scroll_indicator, paginate
from .prompt import CheckboxPrompt, checkbox
from .render import render, render_item

__all__ = [
    "CheckboxPrompt",
    "Page",
    "calculate_visible_range",
    "checkbox",
    "format_scroll_indicator",
    "paginate",
    "render",
    "render_item",
]
