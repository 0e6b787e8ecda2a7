"""Locate and read ``rosterq.toml``.

The file is found the way git finds ``.git/``: ``ROSTERQ_CONFIG`` names
it outright, otherwise the first ``rosterq.toml`` in the start directory
or one of its ancestors wins.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from rosterq.config.models import RosterConfig

CONFIG_FILENAME = "rosterq.toml"
CONFIG_ENV_VAR = "ROSTERQ_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    A ``ROSTERQ_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* and check its sections against :class:`RosterConfig`.

    Returns the raw table so top-level flags (``quiet``, ``verbose``...)
    reach the settings layer untouched.

    Raises:
        click.ClickException: The file is not TOML, or a section value is
            out of range. The message names the file.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    try:
        RosterConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise click.ClickException(f"Invalid config in {path}: {problems}") from exc
    return data
