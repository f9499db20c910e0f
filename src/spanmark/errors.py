# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types raised while building annotation lists.

The range errors derive from :class:`Exception` rather than :class:`ValueError`
so that raising them from a pydantic validator propagates the typed error
instead of a ``ValidationError``.
"""

from __future__ import annotations


class AnnotationError(Exception):
    """Base class for rejected annotation ranges.

    Attributes:
        start: First byte offset of the rejected range.
        end: Byte offset one past the end of the rejected range.
    """

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(self.describe())

    def describe(self) -> str:
        """Return the human readable reason for the rejection."""

        return f"range {self.start} .. {self.end} was rejected"

    def __reduce__(self) -> tuple[type[AnnotationError], tuple[int, int]]:
        return (type(self), (self.start, self.end))


class InvalidRangeError(AnnotationError):
    """Raised when a range ends before it starts."""

    def describe(self) -> str:
        return f"range {self.start} .. {self.end} is invalid: {self.end} < {self.start}"


class MultilineRangeError(AnnotationError):
    """Raised when a range is longer than the line that owns it."""

    def describe(self) -> str:
        return f"range {self.start} .. {self.end} crosses line boundary"


class AfterStringEndError(AnnotationError):
    """Raised when a range starts outside every line's content."""

    def describe(self) -> str:
        return f"range {self.start} .. {self.end} starts after last line end"


class ConfigError(Exception):
    """Raised when render configuration input is invalid."""


__all__ = [
    "AfterStringEndError",
    "AnnotationError",
    "ConfigError",
    "InvalidRangeError",
    "MultilineRangeError",
]
