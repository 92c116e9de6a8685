"""Data models for tickbox."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Union

from tickbox.errors import ConfigurationError

DEFAULT_SEPARATOR = "──────────────"


class Status(Enum):
    """Prompt status."""

    PENDING = "pending"
    DONE = "done"


@dataclass(frozen=True)
class Separator:
    """Display-only row used to group choices. Never selectable."""

    label: str = DEFAULT_SEPARATOR


@dataclass(frozen=True)
class Choice:
    """Immutable selectable entry.

    ``disabled`` is either a bool or a reason string shown next to the name.
    """

    value: Any
    name: str | None = None
    disabled: bool | str = False
    checked: bool = False
    short: str | None = None
    description: str | None = None

    @property
    def label(self) -> str:
        return self.name if self.name is not None else str(self.value)

    @property
    def short_label(self) -> str:
        return self.short if self.short is not None else self.label

    def toggled(self) -> Choice:
        return replace(self, checked=not self.checked)

    def with_checked(self, checked: bool) -> Choice:
        if self.checked == checked:
            return self
        return replace(self, checked=checked)


Item = Union[Separator, Choice]

_CHOICE_FIELDS = {f.name for f in fields(Choice)}


def is_selectable(item: Item) -> bool:
    """A choice that is not disabled. Separators never are."""
    return isinstance(item, Choice) and not item.disabled


def is_checked(item: Item) -> bool:
    return is_selectable(item) and item.checked


def normalize_choices(choices: Iterable[Any]) -> tuple[Item, ...]:
    """Convert caller supplied choices into independent items.

    Accepts Choice, Separator, plain strings and mappings with Choice keys.
    A disabled choice is never left checked.
    """
    items: list[Item] = []
    for raw in choices:
        if isinstance(raw, Separator):
            items.append(raw)
            continue
        if isinstance(raw, Choice):
            choice = replace(raw)
        elif isinstance(raw, str):
            choice = Choice(value=raw)
        elif isinstance(raw, Mapping):
            if "value" not in raw:
                raise ConfigurationError(f"Choice mapping has no 'value': {dict(raw)!r}")
            unknown = set(raw) - _CHOICE_FIELDS
            if unknown:
                raise ConfigurationError(
                    f"Unknown choice keys: {', '.join(sorted(unknown))}"
                )
            choice = Choice(**raw)
        else:
            raise ConfigurationError(f"Unsupported choice type: {type(raw).__name__}")

        if choice.disabled and choice.checked:
            choice = replace(choice, checked=False)
        items.append(choice)
    return tuple(items)


@dataclass(frozen=True)
class Snapshot:
    """Complete prompt state for one turn. Replaced wholesale on every change."""

    items: tuple[Item, ...]
    active: int
    status: Status = Status.PENDING
    error_message: str | None = None
    help_tip_visible: bool = True
    validating: bool = False
    answer: tuple[Any, ...] | None = None

    @property
    def selection(self) -> list[Choice]:
        """Checked choices in list order."""
        return [item for item in self.items if is_checked(item)]

    @property
    def active_item(self) -> Item:
        return self.items[self.active]
