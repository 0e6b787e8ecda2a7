"""Tests for config discovery and loading."""

from pathlib import Path

import click
import pytest

from rosterq.config.discovery import CONFIG_ENV_VAR, find_config, read_config_file


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("")
        assert find_config(tmp_path) == toml.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == toml.resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "rosterq.toml").write_text("")
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestReadConfigFile:
    def test_returns_raw_tables(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("quiet = true\n\n[engine]\nefficiency_threshold = 65\n")
        assert read_config_file(toml) == {"quiet": True, "engine": {"efficiency_threshold": 65}}

    def test_malformed_toml_names_file(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("[engine\n")
        with pytest.raises(click.ClickException, match="Invalid TOML") as excinfo:
            read_config_file(toml)
        assert str(toml) in excinfo.value.message

    def test_out_of_range_value_names_file_and_field(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("[engine]\npage_size = 0\n")
        with pytest.raises(click.ClickException, match="Invalid config") as excinfo:
            read_config_file(toml)
        assert str(toml) in excinfo.value.message
        assert "engine.page_size" in excinfo.value.message
