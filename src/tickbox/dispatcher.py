"""Keymap dispatcher: turns key events into snapshot transitions."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from tickbox.bounds import Bounds, resolve_bounds
from tickbox.config import REQUIRED_MESSAGE, PromptConfig
from tickbox.keys import KeyEvent, KeyName
from tickbox.models import Item, Snapshot, Status, is_selectable
from tickbox.store import SnapshotStore
from tickbox.validation import ValidationGate

logger = logging.getLogger("tickbox.dispatcher")


def initial_snapshot(config: PromptConfig) -> Snapshot:
    """Build the first snapshot, with the cursor on the first selectable item.

    Raises:
        ConfigurationError: If no choice is selectable.
    """
    bounds = resolve_bounds(config.items)
    return Snapshot(items=config.items, active=bounds.first, help_tip_visible=config.show_help)


def toggle_at(items: tuple[Item, ...], index: int) -> tuple[Item, ...]:
    item = items[index]
    if not is_selectable(item):
        return items
    return items[:index] + (item.toggled(),) + items[index + 1 :]


def toggle_all(items: tuple[Item, ...]) -> tuple[Item, ...]:
    """Check every selectable item, or uncheck all when all are already checked."""
    any_unchecked = any(is_selectable(item) and not item.checked for item in items)
    return tuple(
        item.with_checked(any_unchecked) if is_selectable(item) else item
        for item in items
    )


def invert_all(items: tuple[Item, ...]) -> tuple[Item, ...]:
    return tuple(item.toggled() if is_selectable(item) else item for item in items)


def step(items: tuple[Item, ...], active: int, offset: int) -> int:
    """Move circularly from ``active`` until a selectable index is reached."""
    count = len(items)
    index = active
    for _ in range(count):
        index = (index + offset + count) % count
        if is_selectable(items[index]):
            return index
    return active


class KeymapDispatcher:
    """Applies one key at a time to the snapshot in ``store``.

    Keys are serialized: a key that arrives while a confirm is awaiting
    validation is handled only after the confirm has published its result.
    """

    def __init__(self, store: SnapshotStore, config: PromptConfig):
        self._store = store
        self._config = config
        self._gate = ValidationGate(config.validate)
        self._bounds = resolve_bounds(store.read().items)
        self._lock = asyncio.Lock()

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    async def dispatch(self, event: KeyEvent) -> Snapshot:
        """Apply ``event`` and return the snapshot that is current afterwards."""
        async with self._lock:
            current = self._store.read()
            if current.status is Status.DONE:
                return current

            if event.name is KeyName.ENTER:
                await self._confirm(current)
                return self._store.read()

            nxt = self._transition(current, event)
            if nxt is not current:
                if nxt.items is not current.items:
                    self._bounds = resolve_bounds(nxt.items)
                self._store.replace(nxt)
            return self._store.read()

    def _transition(self, snap: Snapshot, event: KeyEvent) -> Snapshot:
        shortcuts = self._config.shortcuts

        if event.name in (KeyName.UP, KeyName.DOWN):
            return self._move(snap, -1 if event.name is KeyName.UP else 1)

        if event.name is KeyName.SPACE:
            return replace(
                snap,
                items=toggle_at(snap.items, snap.active),
                error_message=None,
                help_tip_visible=False,
            )

        if event.name is not KeyName.CHAR:
            return snap

        if shortcuts.all is not None and event.char == shortcuts.all:
            return replace(snap, items=toggle_all(snap.items), error_message=None)

        if shortcuts.invert is not None and event.char == shortcuts.invert:
            return replace(snap, items=invert_all(snap.items), error_message=None)

        digit = event.digit
        if digit is not None:
            index = digit - 1
            if 0 <= index < len(snap.items) and is_selectable(snap.items[index]):
                return replace(
                    snap,
                    active=index,
                    items=toggle_at(snap.items, index),
                    error_message=None,
                )

        return snap

    def _move(self, snap: Snapshot, offset: int) -> Snapshot:
        if not self._config.loop:
            if offset < 0 and snap.active == self._bounds.first:
                return snap
            if offset > 0 and snap.active == self._bounds.last:
                return snap
        active = step(snap.items, snap.active, offset)
        if active == snap.active:
            return snap
        return replace(snap, active=active)

    async def _confirm(self, snap: Snapshot) -> None:
        selection = snap.selection

        if self._config.required and not selection:
            logger.debug("confirm rejected: nothing selected")
            self._store.replace(replace(snap, error_message=REQUIRED_MESSAGE))
            return

        self._store.replace(replace(snap, validating=True))
        try:
            ok, message = await self._gate.check(selection)
        except Exception:
            self._store.replace(replace(snap, validating=False))
            raise

        if ok:
            answer = tuple(choice.value for choice in selection)
            logger.debug("prompt done with %d value(s)", len(answer))
            self._store.replace(
                replace(
                    snap,
                    status=Status.DONE,
                    validating=False,
                    error_message=None,
                    answer=answer,
                )
            )
        else:
            self._store.replace(replace(snap, validating=False, error_message=message))
