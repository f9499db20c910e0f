# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable annotation values bound to a byte range of the source text."""

from __future__ import annotations

import builtins
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, NonNegativeInt, model_validator

from .errors import InvalidRangeError
from .severity import Severity

SpanLike: TypeAlias = range | tuple[int, int]


def span_bounds(span: SpanLike) -> tuple[int, int]:
    """Return the ``(start, end)`` byte offsets described by ``span``.

    Args:
        span: Either a ``range`` with a step of one or a ``(start, end)`` pair.

    Returns:
        tuple[int, int]: Start and end offsets exactly as supplied, so that an
        inverted pair survives until :class:`Annotation` rejects it.

    Raises:
        TypeError: If ``span`` is neither a range nor a pair of integers.
        ValueError: If ``span`` is a range with a step other than one.
    """

    if isinstance(span, range):
        if span.step != 1:
            raise ValueError(f"annotation ranges must have a step of 1, got {span.step}")
        return span.start, span.stop
    if isinstance(span, tuple) and len(span) == 2:
        start, end = span
        return int(start), int(end)
    raise TypeError(f"expected a range or a (start, end) pair, got {span!r}")


class Annotation(BaseModel):
    """A single diagnostic marker over the half-open byte range ``[start, end)``.

    ``header`` is shown after the severity label and ``text`` next to the
    caret underline. The fragment is underlined even when ``text`` is ``None``;
    use a zero length range to suppress the underline.
    """

    model_config = ConfigDict(frozen=True)

    start: NonNegativeInt
    end: NonNegativeInt
    severity: Severity
    header: str | None = None
    text: str | None = None

    @model_validator(mode="after")
    def _check_order(self) -> Annotation:
        """Reject ranges that end before they start."""
        if self.end < self.start:
            raise InvalidRangeError(self.start, self.end)
        return self

    @classmethod
    def new(
        cls,
        span: SpanLike,
        severity: Severity | str,
        header: str | None = None,
        text: str | None = None,
    ) -> Annotation:
        """Create an annotation over ``span``.

        Args:
            span: Byte range as ``range(start, end)`` or ``(start, end)``.
            severity: Severity member or its string value.
            header: Optional message shown after the severity label.
            text: Optional message shown next to the underline.

        Returns:
            Annotation: The validated annotation.

        Raises:
            InvalidRangeError: If the range ends before it starts.
        """

        start, end = span_bounds(span)
        if end < start:
            raise InvalidRangeError(start, end)
        return cls(start=start, end=end, severity=Severity(severity), header=header, text=text)

    @classmethod
    def info(cls, span: SpanLike, header: str | None = None, text: str | None = None) -> Annotation:
        """Create a :attr:`Severity.INFO` annotation."""
        return cls.new(span, Severity.INFO, header, text)

    @classmethod
    def warning(cls, span: SpanLike, header: str | None = None, text: str | None = None) -> Annotation:
        """Create a :attr:`Severity.WARNING` annotation."""
        return cls.new(span, Severity.WARNING, header, text)

    @classmethod
    def error(cls, span: SpanLike, header: str | None = None, text: str | None = None) -> Annotation:
        """Create a :attr:`Severity.ERROR` annotation."""
        return cls.new(span, Severity.ERROR, header, text)

    @property
    def range(self) -> builtins.range:
        """Return the annotated byte range."""
        return range(self.start, self.end)


__all__ = ["Annotation", "SpanLike", "span_bounds"]
