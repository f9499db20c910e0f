# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Terminal detection and rich console provisioning."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal, TextIO

from rich.color import ColorSystem
from rich.console import Console

LOGGER = logging.getLogger(__name__)

_COLOR_SYSTEMS: Final[dict[str, ColorSystem]] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.STANDARD,
}


def detect_tty(stream: TextIO) -> bool:
    """Return ``True`` when ``stream`` appears to be backed by a terminal.

    Args:
        stream: Text stream that output will be written to.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


class ColorChoice(str, Enum):
    """Enumerate colour policies for standard stream output."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"

    def resolve(self, stream: TextIO) -> bool:
        """Return whether output written to ``stream`` should be coloured.

        Args:
            stream: Destination stream consulted when the policy is ``auto``.

        Returns:
            bool: ``True`` when ANSI styling should be emitted.
        """

        if self is ColorChoice.ALWAYS:
            return True
        if self is ColorChoice.NEVER:
            return False
        return detect_tty(stream)


def console_for(stream: TextIO, *, color: bool) -> Console:
    """Return a rich console bound to ``stream``.

    Args:
        stream: Destination text stream.
        color: ``True`` when ANSI styling should be emitted.

    Returns:
        Console: Console whose detected colour system decides how rendered
        output is styled.
    """

    color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
        "auto" if color else None
    )
    LOGGER.debug("console for %r: color=%s", getattr(stream, "name", stream), color)
    return Console(
        file=stream,
        color_system=color_system,
        force_terminal=color,
        no_color=not color,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )


def ansi_color_system(console: Console) -> ColorSystem | None:
    """Return the colour system ANSI output for ``console`` should use.

    Args:
        console: Console provisioned by :func:`console_for`.

    Returns:
        ColorSystem | None: Detected colour system, or ``None`` when the
        console emits no colour (plain stream or dumb terminal).
    """

    name = console.color_system
    return None if name is None else _COLOR_SYSTEMS[name]


__all__ = ["ColorChoice", "ansi_color_system", "console_for", "detect_tty"]
