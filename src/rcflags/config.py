# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for the rcflags command-line tools."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_FILENAME: Final[str] = "rcflags.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "rcflags"
CATALOG_ENV_VAR: Final[str] = "RCFLAGS_CATALOG"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class RcflagsConfig(BaseModel):
    """Settings shared by every command."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    catalog_path: Path | None = None
    json_indent: int = Field(default=2, ge=0, le=8)
    strict: bool = False
    color: bool = True
    emoji: bool = True

    def resolve_catalog(self, root: Path) -> Path | None:
        """Return ``catalog_path`` anchored at ``root`` when it is relative."""

        if self.catalog_path is None:
            return None
        path = self.catalog_path.expanduser()
        return path if path.is_absolute() else root / path


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc


def _load_raw(root: Path) -> tuple[Mapping[str, Any], str]:
    """Return the raw settings table and a description of where it came from."""

    dedicated = root / CONFIG_FILENAME
    if dedicated.is_file():
        return _read_toml(dedicated), str(dedicated)
    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        tool_section = _read_toml(pyproject).get(PYPROJECT_TOOL_KEY)
        if isinstance(tool_section, Mapping):
            section = tool_section.get(PYPROJECT_SECTION_KEY)
            if isinstance(section, Mapping):
                return section, f"{pyproject} [tool.rcflags]"
    return {}, "defaults"


def load_config(root: Path, *, env: Mapping[str, str] | None = None) -> RcflagsConfig:
    """Load settings for the project rooted at ``root``.

    ``rcflags.toml`` takes precedence over ``[tool.rcflags]`` in
    ``pyproject.toml``; ``RCFLAGS_CATALOG`` overrides ``catalog_path``.

    Args:
        root: Directory searched for configuration files.
        env: Environment mapping, defaulting to ``os.environ``.

    Returns:
        RcflagsConfig: Validated configuration.

    Raises:
        ConfigError: If a configuration file is malformed or fails validation.
    """

    environment = os.environ if env is None else env
    raw, origin = _load_raw(root)
    data = dict(raw)
    catalog_override = environment.get(CATALOG_ENV_VAR)
    if catalog_override:
        data["catalog_path"] = catalog_override
    try:
        return RcflagsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{origin}: {exc}") from exc


__all__ = [
    "CATALOG_ENV_VAR",
    "ConfigError",
    "RcflagsConfig",
    "load_config",
]
