"""tickbox - keyboard-driven multi-select prompt for the terminal."""

from tickbox.bounds import Bounds, resolve_bounds
from tickbox.config import PromptConfig, Settings, Shortcuts
from tickbox.dispatcher import KeymapDispatcher, initial_snapshot
from tickbox.errors import ConfigurationError, PromptCancelled, TickboxError
from tickbox.keys import KeyEvent, KeyName, decode_key
from tickbox.models import Choice, Separator, Snapshot, Status, is_checked, is_selectable
from tickbox.store import SnapshotStore
from tickbox.ui import CheckboxPrompt, checkbox

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "CheckboxPrompt",
    "Choice",
    "ConfigurationError",
    "KeyEvent",
    "KeyName",
    "KeymapDispatcher",
    "PromptCancelled",
    "PromptConfig",
    "Separator",
    "Settings",
    "Shortcuts",
    "Snapshot",
    "SnapshotStore",
    "Status",
    "TickboxError",
    "checkbox",
    "decode_key",
    "initial_snapshot",
    "is_checked",
    "is_selectable",
    "resolve_bounds",
]
