"""Prompt options and user-level defaults."""

from __future__ import annotations

import json
import os
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from tickbox.errors import ConfigurationError
from tickbox.keys import RESERVED_CHARS
from tickbox.models import Choice, Item, normalize_choices

DEFAULT_PAGE_SIZE = 7
REQUIRED_MESSAGE = "At least one choice must be selected"
INVALID_MESSAGE = "You must select a valid value"

ValidationResult = Union[bool, str]
Validator = Callable[[list[Choice]], Union[ValidationResult, Awaitable[ValidationResult]]]

# Module-level cache for singleton pattern
_settings_cache: Settings | None = None


def accept_all(selection: list[Choice]) -> bool:
    return True


@dataclass(frozen=True)
class Shortcuts:
    """Bulk toggle keys. ``None`` disables a shortcut."""

    all: str | None = "a"
    invert: str | None = "i"

    def __post_init__(self) -> None:
        keys = [k for k in (self.all, self.invert) if k is not None]
        for key in keys:
            if len(key) != 1:
                raise ConfigurationError(f"Shortcut must be a single character: {key!r}")
            if key in RESERVED_CHARS:
                raise ConfigurationError(f"Shortcut {key!r} is already bound")
        if len(set(keys)) != len(keys):
            raise ConfigurationError("Shortcuts 'all' and 'invert' must differ")


@dataclass
class PromptConfig:
    """Every option a checkbox prompt accepts, resolved once at construction.

    ``instructions``: a string replaces the help tip, ``False`` hides it,
    ``None`` or ``True`` keeps the default.
    """

    choices: Sequence[Any]
    message: str = ""
    required: bool = False
    loop: bool = True
    validate: Validator = accept_all
    instructions: str | bool | None = None
    page_size: int = DEFAULT_PAGE_SIZE
    shortcuts: Shortcuts = field(default_factory=Shortcuts)

    def __post_init__(self) -> None:
        self.items: tuple[Item, ...] = normalize_choices(self.choices)
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ConfigurationError(f"page_size must be an int: {self.page_size!r}")
        if self.page_size < 1:
            raise ConfigurationError(f"page_size must be at least 1: {self.page_size}")
        if not callable(self.validate):
            raise ConfigurationError("validate must be callable")

    @property
    def show_help(self) -> bool:
        return self.instructions is not False


def get_default_config_dir() -> Path:
    """Get default config directory, respecting TICKBOX_CONFIG_DIR env var."""
    config_dir = os.environ.get("TICKBOX_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "tickbox"


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing or reload."""
    global _settings_cache
    _settings_cache = None


class Settings:
    """User defaults from config.json with TICKBOX_* env overrides."""

    DEFAULTS: dict[str, Any] = {
        "page_size": DEFAULT_PAGE_SIZE,
        "loop": True,
        "show_help": True,
    }

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @classmethod
    def load(cls, config_dir: Path | None = None) -> Settings:
        """Factory method - explicit loading with caching."""
        global _settings_cache

        if _settings_cache is not None and config_dir is None:
            return _settings_cache

        settings = cls(config_dir)
        settings._load_from_file()
        settings._apply_env_overrides()

        if config_dir is None:
            _settings_cache = settings

        return settings

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Settings has no attribute '{name}'")

    def prompt_options(self) -> dict[str, Any]:
        """Keyword defaults for PromptConfig."""
        options: dict[str, Any] = {
            "page_size": self.page_size,
            "loop": self.loop,
        }
        if not self.show_help:
            options["instructions"] = False
        return options

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    data = json.loads(content)
                    if isinstance(data, dict):
                        self._data = {
                            key: self._check(key, value) if key in self.DEFAULTS else value
                            for key, value in data.items()
                        }
            except json.JSONDecodeError:
                # Corrupted file - use defaults
                self._data = {}

    def _apply_env_overrides(self) -> None:
        """Apply TICKBOX_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"TICKBOX_{key.upper()}"
            if env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], type(default))

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(f"Expected an integer, got {value!r}") from None
        return value

    @classmethod
    def _check(cls, key: str, value: Any) -> Any:
        """Type-check a value read from config.json."""
        target_type = type(cls.DEFAULTS[key])
        if isinstance(value, str):
            return cls._coerce(value, target_type)
        if isinstance(value, bool):
            if target_type is bool:
                return value
        elif isinstance(value, target_type):
            return value
        raise ConfigurationError(
            f"Setting '{key}' must be {target_type.__name__}, got {value!r}"
        )
