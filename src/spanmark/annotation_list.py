# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Annotation lists: validated annotations over one source text.

Typical usage::

    listing = AnnotationList("hello.txt", "Hello world!")
    listing.warning(range(4, 7), "punctuation problem", "you probably forgot a comma")
    listing.info(range(0, 0), "consider adding some translations")
    listing.show_stderr()
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Sequence
from typing import Self, TextIO

from .annotation import Annotation, SpanLike
from .console import ColorChoice, ansi_color_system, console_for
from .errors import AfterStringEndError, AnnotationError
from .lines import AnnotatedLine, LineIndex, SourceText
from .rendering import render
from .severity import Severity
from .sinks import AnsiBufferSink, PlainBufferSink, StyledSink
from .stylesheet import Stylesheet

LOGGER = logging.getLogger(__name__)


class AnnotationList:
    """List of annotations applied to a source string.

    The list keeps a reference to the source text; ``filename`` is only used to
    format messages, so the corresponding file does not need to exist.
    """

    def __init__(self, filename: str | os.PathLike[str], source: str) -> None:
        """Index ``source`` into lines; ``filename`` is used for display only."""
        self._filename = os.fspath(filename)
        self._source = SourceText.from_text(source)
        self._lines = LineIndex(self._source)

    @property
    def filename(self) -> str:
        """Return the filename shown in rendered messages."""
        return self._filename

    @property
    def source(self) -> str:
        """Return the annotated source text."""
        return self._source.text

    def annotated_lines(self) -> Sequence[AnnotatedLine]:
        """Return the line records in source order."""
        return self._lines

    def iter_annotations(self) -> Iterator[tuple[int, AnnotatedLine, Annotation]]:
        """Yield ``(line_number, line, annotation)`` in render order.

        Lines are visited in source order and annotations in insertion order;
        ``line_number`` is 1-based.
        """

        for index, line in enumerate(self._lines):
            for annotation in line.annotations:
                yield index + 1, line, annotation

    def __len__(self) -> int:
        return sum(len(line.annotations) for line in self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnnotationList):
            return NotImplemented
        return self._filename == other._filename and self._lines == other._lines

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(filename={self._filename!r}, lines={len(self._lines)}, annotations={len(self)})"

    def add(self, annotation: Annotation) -> Self:
        """Attach ``annotation`` to the line that contains its start offset.

        Args:
            annotation: Annotation to attach.

        Returns:
            Self: The list itself so calls can be chained.

        Raises:
            AfterStringEndError: If the start offset lies on a line terminator
                or past the end of the text.
            MultilineRangeError: If the range is longer than the owning line.
        """

        line = self._lines[self._lines.locate(annotation.start)]
        try:
            if annotation.start >= line.end:
                raise AfterStringEndError(annotation.start, annotation.end)
            line.add(annotation)
        except AnnotationError as exc:
            LOGGER.debug("rejected annotation in %s: %s", self._filename, exc)
            raise
        return self

    def annotate(
        self,
        span: SpanLike,
        severity: Severity | str,
        header: str | None = None,
        text: str | None = None,
    ) -> Self:
        """Build an annotation with :meth:`Annotation.new` and :meth:`add` it."""
        return self.add(Annotation.new(span, severity, header, text))

    def info(self, span: SpanLike, header: str | None = None, text: str | None = None) -> Self:
        """Add a :attr:`Severity.INFO` annotation."""
        return self.add(Annotation.info(span, header, text))

    def warning(self, span: SpanLike, header: str | None = None, text: str | None = None) -> Self:
        """Add a :attr:`Severity.WARNING` annotation."""
        return self.add(Annotation.warning(span, header, text))

    def error(self, span: SpanLike, header: str | None = None, text: str | None = None) -> Self:
        """Add a :attr:`Severity.ERROR` annotation."""
        return self.add(Annotation.error(span, header, text))

    def show(self, sink: StyledSink, stylesheet: Stylesheet) -> None:
        """Render every annotation into ``sink`` using ``stylesheet``.

        No buffering is performed; prefer one of the buffer sinks from
        :mod:`spanmark.sinks` over a raw stream.
        """

        render(self.iter_annotations(), sink, stylesheet, filename=self._filename)

    def show_stream(
        self,
        stream: TextIO,
        stylesheet: Stylesheet | None = None,
        *,
        color: ColorChoice | str = ColorChoice.AUTO,
    ) -> None:
        """Print the rendered annotations to ``stream``.

        Line content is written verbatim: tabs and control characters such as
        ``"\\r"`` reach the stream unchanged.

        Args:
            stream: Destination text stream.
            stylesheet: Styles to apply; defaults to :meth:`Stylesheet.colored`.
            color: Colour policy; ``auto`` colours only terminal streams.
        """

        console = console_for(stream, color=ColorChoice(color).resolve(stream))
        color_system = ansi_color_system(console)
        sink: PlainBufferSink | AnsiBufferSink
        if color_system is None:
            sink = PlainBufferSink()
        else:
            sink = AnsiBufferSink(color_system)
        self.show(sink, Stylesheet.colored() if stylesheet is None else stylesheet)
        console.file.write(sink.getvalue().decode("utf-8"))
        console.file.flush()

    def show_stdout(
        self,
        stylesheet: Stylesheet | None = None,
        *,
        color: ColorChoice | str = ColorChoice.AUTO,
    ) -> None:
        """Print to stdout, colourised when stdout is a terminal."""
        self.show_stream(sys.stdout, stylesheet, color=color)

    def show_stderr(
        self,
        stylesheet: Stylesheet | None = None,
        *,
        color: ColorChoice | str = ColorChoice.AUTO,
    ) -> None:
        """Print to stderr, colourised when stderr is a terminal."""
        self.show_stream(sys.stderr, stylesheet, color=color)

    def to_bytes(self) -> bytes:
        """Render a monochrome message into bytes."""
        sink = PlainBufferSink()
        self.show(sink, Stylesheet.monochrome())
        return sink.getvalue()

    def to_ansi_bytes(self, stylesheet: Stylesheet | None = None) -> bytes:
        """Render into bytes, colourised with ANSI escape codes."""
        sink = AnsiBufferSink()
        self.show(sink, Stylesheet.colored() if stylesheet is None else stylesheet)
        return sink.getvalue()

    def to_string(self) -> str:
        """Render a monochrome message into a string.

        Raises:
            UnicodeDecodeError: If the rendered bytes are not valid UTF-8.
        """

        return self.to_bytes().decode("utf-8")

    def to_ansi_string(self, stylesheet: Stylesheet | None = None) -> str:
        """Render into a string, colourised with ANSI escape codes."""
        return self.to_ansi_bytes(stylesheet).decode("utf-8")

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["AnnotationList"]
