"""Tests for settings error handling."""

from pathlib import Path

from tickbox.config import DEFAULT_PAGE_SIZE, Settings


def test_corrupted_config_loads_defaults(tmp_path: Path):
    """Corrupted config file should fall back to defaults."""
    (tmp_path / "config.json").write_text("{ invalid json }")

    settings = Settings.load(tmp_path)

    assert settings.page_size == DEFAULT_PAGE_SIZE
    assert settings.loop is True


def test_empty_config_file_loads_defaults(tmp_path: Path):
    """Empty config file should load defaults."""
    (tmp_path / "config.json").write_text("")

    assert Settings.load(tmp_path).page_size == DEFAULT_PAGE_SIZE


def test_non_object_config_loads_defaults(tmp_path: Path):
    """A JSON list instead of an object is ignored."""
    (tmp_path / "config.json").write_text("[1, 2, 3]")

    assert Settings.load(tmp_path).show_help is True

