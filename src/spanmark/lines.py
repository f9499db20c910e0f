# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line index over an immutable source text.

Offsets are byte offsets into the UTF-8 encoding of the source. Each line
keeps only its ``(start, length)`` pair and a reference to the shared
:class:`SourceText`; content is sliced on demand.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Final, Self

from .annotation import Annotation
from .errors import MultilineRangeError

LOGGER = logging.getLogger(__name__)

NEWLINE: Final[int] = ord("\n")


@dataclass(frozen=True, slots=True)
class SourceText:
    """Caller supplied text paired with its UTF-8 encoding."""

    text: str
    data: bytes = field(repr=False)

    @classmethod
    def from_text(cls, text: str) -> SourceText:
        """Encode ``text`` once and wrap it."""
        return cls(text=text, data=text.encode("utf-8"))

    def __len__(self) -> int:
        return len(self.data)

    def view(self, start: int, end: int) -> memoryview:
        """Return a zero-copy view of the bytes in ``[start, end)``."""
        return memoryview(self.data)[start:end]


@dataclass(slots=True, eq=False)
class AnnotatedLine:
    """One logical line of the source and the annotations attached to it."""

    start: int
    length: int
    source: SourceText = field(repr=False)
    annotations: list[Annotation] = field(default_factory=list)

    @property
    def end(self) -> int:
        """Byte offset one past the last content byte."""
        return self.start + self.length

    @property
    def content_bytes(self) -> memoryview:
        """Return the line content as a view into the shared source bytes."""
        return self.source.view(self.start, self.end)

    @property
    def content(self) -> str:
        """Return the decoded line content, without the newline."""
        return str(self.content_bytes, "utf-8")

    def add(self, annotation: Annotation) -> Self:
        """Attach ``annotation`` when its length fits within this line.

        The comparison is between the range length and the line length; the
        range end is not compared with :attr:`end`.

        Raises:
            MultilineRangeError: If the range is longer than the line content.
        """

        if annotation.end - annotation.start > self.length:
            raise MultilineRangeError(annotation.start, annotation.end)
        self.annotations.append(annotation)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotatedLine):
            return NotImplemented
        return (
            self.start == other.start
            and self.content_bytes == other.content_bytes
            and self.annotations == other.annotations
        )

    __hash__ = None  # type: ignore[assignment]


def line_boundaries(data: bytes) -> list[int]:
    """Return the sorted line boundaries of ``data``.

    The result is ``0``, then ``idx`` and ``idx + 1`` for every newline at
    ``idx``, then ``len(data)``. Adjacent pairs bracket the content of each
    line without its terminator.
    """

    bounds = [0]
    position = data.find(NEWLINE)
    while position != -1:
        bounds.append(position)
        bounds.append(position + 1)
        position = data.find(NEWLINE, position + 1)
    bounds.append(len(data))
    return bounds


class LineIndex(Sequence[AnnotatedLine]):
    """Ordered line records built once from a :class:`SourceText`."""

    def __init__(self, source: SourceText) -> None:
        """Split ``source`` into one record per line."""
        bounds = line_boundaries(source.data)
        self._lines = [
            AnnotatedLine(start=start, length=end - start, source=source)
            for start, end in zip(bounds[::2], bounds[1::2], strict=True)
        ]
        self._starts = [line.start for line in self._lines]
        LOGGER.debug("indexed %d lines over %d bytes", len(self._lines), len(source))

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> AnnotatedLine:  # type: ignore[override]
        return self._lines[index]

    def __iter__(self) -> Iterator[AnnotatedLine]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineIndex):
            return NotImplemented
        return self._lines == other._lines

    __hash__ = None  # type: ignore[assignment]

    @property
    def starts(self) -> tuple[int, ...]:
        """Return the start offset of every line, in source order."""
        return tuple(self._starts)

    def locate(self, offset: int) -> int:
        """Return the index of the last line whose start does not exceed ``offset``.

        The first line always starts at ``0``, so every non-negative offset
        has an owner.
        """

        index = bisect_right(self._starts, offset) - 1
        if index < 0:
            raise ValueError(f"offset {offset} precedes the first line")
        return index


__all__ = ["AnnotatedLine", "LineIndex", "SourceText", "line_boundaries"]
