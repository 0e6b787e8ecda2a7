"""Tests for RosterSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from rosterq.config.settings import RosterSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "ROSTERQ_CONFIG",
        "ROSTERQ_ENGINE__EFFICIENCY_THRESHOLD",
        "ROSTERQ_ENGINE__PAGE_SIZE",
        "ROSTERQ_VERBOSE",
    ):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RosterSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.engine.efficiency_threshold == 50
        assert settings.engine.page_size == 3

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RosterSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("[engine]\npage_size = 5\n")
        settings = RosterSettings.from_cli(start=tmp_path)
        assert settings.engine.page_size == 5
        assert settings.engine.efficiency_threshold == 50
        assert settings.config_path == toml.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 90\n")
        settings = RosterSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.output.width == 90
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "rosterq.toml").write_text("[engine\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RosterSettings.from_cli(start=tmp_path)

    def test_out_of_range_toml_value(self, tmp_path: Path) -> None:
        toml = tmp_path / "rosterq.toml"
        toml.write_text("[engine]\npage_size = 0\n")
        with pytest.raises(click.ClickException, match="Invalid config") as excinfo:
            RosterSettings.from_cli(start=tmp_path)
        assert str(toml.resolve()) in excinfo.value.message


class TestPriority:
    def test_env_var_applies(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROSTERQ_ENGINE__EFFICIENCY_THRESHOLD", "70")
        settings = RosterSettings.from_cli(start=tmp_path)
        assert settings.engine.efficiency_threshold == 70

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = RosterSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "rosterq.toml").write_text("quiet = true\n")
        settings = RosterSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False
