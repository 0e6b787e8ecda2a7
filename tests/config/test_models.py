"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from rosterq.config.models import EngineConfig, OutputConfig, RosterConfig


class TestDefaults:
    def test_engine_defaults(self) -> None:
        cfg = EngineConfig()
        assert cfg.efficiency_threshold == 50
        assert cfg.page_size == 3

    def test_root_composes_sections(self) -> None:
        cfg = RosterConfig()
        assert cfg.engine == EngineConfig()
        assert cfg.output.width == 120


class TestValidation:
    @pytest.mark.parametrize("size", [0, -1])
    def test_page_size_must_be_positive(self, size: int) -> None:
        with pytest.raises(ValidationError):
            EngineConfig(page_size=size)

    def test_width_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(width=0)

    def test_sparse_section(self) -> None:
        cfg = RosterConfig.model_validate({"engine": {"page_size": 10}})
        assert cfg.engine.page_size == 10
        assert cfg.engine.efficiency_threshold == 50

    def test_frozen(self) -> None:
        cfg = EngineConfig()
        with pytest.raises(ValidationError):
            cfg.page_size = 5  # type: ignore[misc]
