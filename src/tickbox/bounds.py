"""First/last selectable index of an item list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tickbox.errors import ConfigurationError
from tickbox.models import Item, is_selectable


@dataclass(frozen=True)
class Bounds:
    """Index range of selectable items. Always ``first <= last``."""

    first: int
    last: int


def resolve_bounds(items: Sequence[Item]) -> Bounds:
    """Find the lowest and highest selectable indices.

    Raises:
        ConfigurationError: If no item is selectable.
    """
    selectable = [i for i, item in enumerate(items) if is_selectable(item)]
    if not selectable:
        raise ConfigurationError("no selectable choices")
    return Bounds(first=selectable[0], last=selectable[-1])
