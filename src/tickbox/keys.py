"""Decode raw readchar keys into prompt key events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import readchar

ENTER_KEYS = (readchar.key.ENTER, "\r", "\n")
UP_KEYS = (readchar.key.UP, "k")
DOWN_KEYS = (readchar.key.DOWN, "j")
INTERRUPT_KEYS = (readchar.key.CTRL_C,)

# Keys with a fixed meaning; shortcuts may not reuse them.
DIGITS = "0123456789"
RESERVED_CHARS = frozenset({" ", "k", "j", *DIGITS})


class KeyName(Enum):
    """Decoded key kinds."""

    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    SPACE = "space"
    INTERRUPT = "interrupt"
    CHAR = "char"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keystroke. ``char`` is set for printable keys."""

    name: KeyName
    char: str = ""

    @property
    def digit(self) -> int | None:
        if self.name is KeyName.CHAR and len(self.char) == 1 and self.char in DIGITS:
            return int(self.char)
        return None


def decode_key(raw: str) -> KeyEvent:
    """Map a key string from ``readchar.readkey()`` to a KeyEvent."""
    if raw in ENTER_KEYS:
        return KeyEvent(KeyName.ENTER)
    if raw in UP_KEYS:
        return KeyEvent(KeyName.UP, raw if len(raw) == 1 else "")
    if raw in DOWN_KEYS:
        return KeyEvent(KeyName.DOWN, raw if len(raw) == 1 else "")
    if raw == readchar.key.SPACE:
        return KeyEvent(KeyName.SPACE, " ")
    if raw in INTERRUPT_KEYS:
        return KeyEvent(KeyName.INTERRUPT)
    if len(raw) == 1 and raw.isprintable():
        return KeyEvent(KeyName.CHAR, raw)
    return KeyEvent(KeyName.UNKNOWN)
