# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Styled output sinks consumed by the renderer."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.color import ColorSystem
from rich.style import Style


@runtime_checkable
class StyledSink(Protocol):
    """Byte sink that understands style changes."""

    def write(self, data: bytes) -> None:
        """Append ``data`` using the active style."""

        raise NotImplementedError

    def set_style(self, style: Style) -> None:
        """Make ``style`` the active style for subsequent writes."""

        raise NotImplementedError

    def reset(self) -> None:
        """Drop the active style."""

        raise NotImplementedError


class PlainBufferSink(StyledSink):
    """Collect raw bytes and ignore every style change."""

    def __init__(self) -> None:
        """Start with an empty buffer."""
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        """Append ``data`` unchanged."""
        self._buffer += data

    def set_style(self, style: Style) -> None:
        """Ignore ``style``; plain output carries no styling."""
        return None

    def reset(self) -> None:
        """Do nothing; there is no active style to drop."""
        return None

    def getvalue(self) -> bytes:
        """Return a copy of the collected bytes."""
        return bytes(self._buffer)


class AnsiBufferSink(StyledSink):
    """Collect bytes with ANSI SGR sequences embedded around styled writes.

    Every write made under a non-null style is wrapped in its own SGR prefix
    and reset suffix, the same way rich renders individual segments.
    """

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        """Start with an empty buffer that renders colours for ``color_system``."""
        self._buffer = bytearray()
        self._style = Style.null()
        self._color_system = color_system

    def write(self, data: bytes) -> None:
        """Append ``data``, wrapped in SGR codes when a style is active."""
        if not self._style:
            self._buffer += data
            return
        rendered = self._style.render(data.decode("utf-8"), color_system=self._color_system)
        self._buffer += rendered.encode("utf-8")

    def set_style(self, style: Style) -> None:
        """Apply ``style`` to subsequent writes."""
        self._style = style

    def reset(self) -> None:
        """Return to unstyled writes."""
        self._style = Style.null()

    def getvalue(self) -> bytes:
        """Return a copy of the collected bytes."""
        return bytes(self._buffer)


__all__ = ["AnsiBufferSink", "PlainBufferSink", "StyledSink"]
