"""Windowing for long choice lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """Visible rows of a list.

    ``indices`` are positions in the full list, in display order. When the
    list wraps they are not contiguous.
    """

    indices: tuple[int, ...]
    scroll_offset: int = 0
    hidden_above: int = 0
    hidden_below: int = 0


def calculate_visible_range(
    cursor: int,
    total_items: int,
    max_visible: int,
    scroll_offset: int,
) -> tuple[int, int, int]:
    """Calculate visible range for a scrolling list.

    Args:
        cursor: Current cursor position
        total_items: Total number of items
        max_visible: Maximum items that fit on screen
        scroll_offset: Current scroll offset

    Returns:
        Tuple of (new_scroll_offset, visible_start, visible_end)
    """
    if total_items == 0:
        return 0, 0, 0

    cursor = max(0, min(cursor, total_items - 1))

    # Keep cursor visible
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1

    scroll_offset = max(0, min(scroll_offset, max(0, total_items - max_visible)))
    visible_end = min(scroll_offset + max_visible, total_items)

    return scroll_offset, scroll_offset, visible_end


def paginate(
    total_items: int,
    active: int,
    page_size: int,
    loop: bool,
    scroll_offset: int = 0,
) -> Page:
    """Pick the rows to show around ``active``.

    A looping list keeps the cursor in the middle row and wraps past the
    ends. A non-looping list scrolls only as far as needed.
    """
    if total_items <= page_size:
        return Page(indices=tuple(range(total_items)))

    if loop:
        start = active - page_size // 2
        indices = tuple((start + k) % total_items for k in range(page_size))
        return Page(indices=indices)

    offset, start, end = calculate_visible_range(active, total_items, page_size, scroll_offset)
    return Page(
        indices=tuple(range(start, end)),
        scroll_offset=offset,
        hidden_above=start,
        hidden_below=total_items - end,
    )


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str | None, str | None]:
    """Format scroll indicators.

    Returns:
        Tuple of (above_indicator, below_indicator) - None if no items hidden
    """
    above = f"[dim]  ↑ {hidden_above} more[/dim]" if hidden_above > 0 else None
    below = f"[dim]  ↓ {hidden_below} more[/dim]" if hidden_below > 0 else None
    return above, below
