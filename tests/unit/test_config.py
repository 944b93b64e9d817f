"""Tests for reckon.toml configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from reckon.core.config import CliConfig, FormatConfig, ReckonConfig, load_config
from reckon.core.errors import ConfigError


class TestDefaults:
    """Defaults apply when nothing is configured."""

    def test_format_defaults(self) -> None:
        assert FormatConfig().precision == 10

    def test_cli_defaults(self) -> None:
        cli = CliConfig()
        assert cli.show_position is True
        assert cli.prompt == "> "
        assert cli.history_file is None

    def test_missing_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "reckon.toml")
        assert config == ReckonConfig()

    def test_with_precision_returns_copy(self) -> None:
        config = ReckonConfig()
        changed = config.with_precision(3)
        assert changed.format.precision == 3
        assert config.format.precision == 10
        assert changed.cli == config.cli


class TestLoadConfig:
    """Values are read from the [format] and [cli] sections."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text(
            """
[format]
precision = 4

[cli]
show_position = false
prompt = "calc> "
history_file = "~/.reckon_history"
"""
        )
        config = load_config(path)
        assert config.format.precision == 4
        assert config.cli.show_position is False
        assert config.cli.prompt == "calc> "
        assert config.cli.history_file == Path("~/.reckon_history")

    def test_partial_file(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text("[format]\nprecision = 2\n")
        config = load_config(path)
        assert config.format.precision == 2
        assert config.cli == CliConfig()

    def test_unrelated_sections_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text("[tool]\nname = 'x'\n")
        assert load_config(path) == ReckonConfig()


class TestConfigErrors:
    """Broken files are reported, not silently replaced by defaults."""

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text("[format\nprecision = ")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert "Cannot read" in exc_info.value.message

    def test_negative_precision(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text("[format]\nprecision = -1\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert "format.precision" in exc_info.value.message

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "reckon.toml"
        path.write_text("[cli]\nshow_position = 'sometimes'\n")
        with pytest.raises(ConfigError):
            load_config(path)
