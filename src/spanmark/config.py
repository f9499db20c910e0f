# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render configuration loaded from TOML documents or ``pyproject.toml``.

A standalone document uses top-level keys; ``pyproject.toml`` uses the
``[tool.spanmark]`` table::

    [tool.spanmark]
    color = "auto"
    preset = "colored"

    [tool.spanmark.styles]
    warning = "bold magenta"
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .console import ColorChoice
from .errors import ConfigError
from .stylesheet import STYLE_FIELDS, Stylesheet

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "spanmark"
COLOR_ENV_VAR: Final[str] = "SPANMARK_COLOR"


class RenderConfig(BaseModel):
    """Presentation settings for rendered annotations."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    color: ColorChoice = ColorChoice.AUTO
    preset: Literal["colored", "monochrome"] = "colored"
    styles: dict[str, str] = Field(default_factory=dict)

    @field_validator("color", mode="before")
    @classmethod
    def _normalise_color(cls, value: object) -> object:
        """Accept colour policies in any letter case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("styles")
    @classmethod
    def _check_style_names(cls, value: dict[str, str]) -> dict[str, str]:
        """Reject overrides for unknown stylesheet fields."""
        unknown = sorted(set(value) - set(STYLE_FIELDS))
        if unknown:
            raise ValueError(f"unknown style names: {', '.join(unknown)}")
        return value

    def stylesheet(self) -> Stylesheet:
        """Return the preset stylesheet with the configured overrides applied.

        Raises:
            ConfigError: If a style definition cannot be parsed.
        """

        base = Stylesheet.colored() if self.preset == "colored" else Stylesheet.monochrome()
        if not self.styles:
            return base
        try:
            return base.with_overrides(self.styles)
        except ValidationError as exc:
            raise ConfigError(f"invalid style definition: {exc}") from exc


def _read_toml(path: Path) -> dict[str, Any]:
    """Return the parsed TOML document stored at ``path``."""

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Configuration at {path} is not valid TOML: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Configuration at {path} could not be read: {exc}") from exc
    return data


def _select_section(path: Path, document: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the table holding render settings within ``document``."""

    if path.name != PYPROJECT_FILENAME:
        return document
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def load_render_config(
    path: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> RenderConfig:
    """Load render settings from ``path`` and the environment.

    Args:
        path: TOML document or ``pyproject.toml`` to read. ``None`` or a
            missing file yields the defaults.
        env: Environment mapping consulted for ``SPANMARK_COLOR``; defaults
            to :data:`os.environ`.

    Returns:
        RenderConfig: Validated configuration.

    Raises:
        ConfigError: If the document or the environment override is invalid.
    """

    environ = os.environ if env is None else env
    payload: dict[str, Any] = {}
    if path is not None:
        resolved = Path(path)
        if resolved.exists():
            payload.update(_select_section(resolved, _read_toml(resolved)))
            LOGGER.debug("loaded render settings from %s", resolved)
        else:
            LOGGER.debug("render settings file %s not found; using defaults", resolved)
    override = environ.get(COLOR_ENV_VAR)
    if override:
        payload["color"] = override
    try:
        return RenderConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render configuration: {exc}") from exc


__all__ = [
    "COLOR_ENV_VAR",
    "RenderConfig",
    "load_render_config",
]
