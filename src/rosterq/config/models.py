"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rosterq.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from rosterq.domain.employee import EFFICIENCY_THRESHOLD

# --- rosterq.toml sections ---


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    efficiency_threshold: int = EFFICIENCY_THRESHOLD
    page_size: int = Field(default=3, gt=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, gt=0)


class RosterConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    engine: EngineConfig = Field(default_factory=EngineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
