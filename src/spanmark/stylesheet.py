# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stylesheets mapping display roles to rich styles."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from .severity import Severity

STYLE_FIELDS: Final[tuple[str, ...]] = ("info", "warning", "error", "linenr", "filename", "content")


class Stylesheet(BaseModel):
    """Set of styles used to colourise rendered annotations.

    Each field accepts a :class:`rich.style.Style` or a style definition such
    as ``"bold yellow"``. Only the foreground colour and the bold attribute are
    used by the built-in presets, but any rich style is accepted.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    info: Style = Field(default_factory=Style.null)
    warning: Style = Field(default_factory=Style.null)
    error: Style = Field(default_factory=Style.null)
    linenr: Style = Field(default_factory=Style.null)
    filename: Style = Field(default_factory=Style.null)
    content: Style = Field(default_factory=Style.null)

    @field_validator(*STYLE_FIELDS, mode="before")
    @classmethod
    def _parse_style(cls, value: object) -> object:
        """Parse textual style definitions into :class:`Style` objects."""
        if value is None:
            return Style.null()
        if isinstance(value, str):
            try:
                return Style.parse(value) if value.strip() else Style.null()
            except StyleSyntaxError as exc:
                raise ValueError(str(exc)) from exc
        return value

    @classmethod
    def monochrome(cls) -> Stylesheet:
        """Return a stylesheet without any colours set."""
        return cls()

    @classmethod
    def colored(cls) -> Stylesheet:
        """Return the default compiler-like coloured stylesheet."""
        return cls(
            info=Style(bold=True),
            warning=Style(bold=True, color="yellow"),
            error=Style(bold=True, color="red"),
            linenr=Style(bold=True, color="blue"),
            filename=Style(bold=True),
            content=Style.null(),
        )

    def by_severity(self, severity: Severity) -> Style:
        """Return the style used for annotations of ``severity``."""
        return {
            Severity.INFO: self.info,
            Severity.WARNING: self.warning,
            Severity.ERROR: self.error,
        }[Severity(severity)]

    def with_overrides(self, overrides: Mapping[str, Style | str | None]) -> Stylesheet:
        """Return a copy of the stylesheet with ``overrides`` applied.

        Args:
            overrides: Style definitions keyed by stylesheet field name.

        Returns:
            Stylesheet: Validated copy carrying the overrides.

        Raises:
            KeyError: If a key does not name a stylesheet field.
            pydantic.ValidationError: If a style definition cannot be parsed.
        """

        unknown = sorted(set(overrides) - set(STYLE_FIELDS))
        if unknown:
            raise KeyError(f"unknown stylesheet fields: {', '.join(unknown)}")
        payload = {name: getattr(self, name) for name in STYLE_FIELDS}
        payload.update(overrides)
        return type(self).model_validate(payload)


__all__ = ["STYLE_FIELDS", "Stylesheet"]
