# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render annotation blocks into a styled sink.

A block for a warning on the first line looks like::

    warning: punctuation problem
      --> hello.txt:1:5
       |
     1 | Hello world!
       |     ^^^ you probably forgot a comma

Blocks are separated by a single blank line. Columns are 1-based byte offsets
within the line.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .annotation import Annotation
from .lines import AnnotatedLine
from .sinks import StyledSink
from .stylesheet import Stylesheet

ARROW: Final[str] = "--> "
GUTTER: Final[str] = "|"
CARET: Final[str] = "^"


def _emit(sink: StyledSink, text: str) -> None:
    sink.write(text.encode("utf-8"))


def render_block(
    sink: StyledSink,
    stylesheet: Stylesheet,
    *,
    filename: str,
    line_number: int,
    line: AnnotatedLine,
    annotation: Annotation,
) -> None:
    """Write the block for one ``annotation`` on ``line``.

    Args:
        sink: Destination sink.
        stylesheet: Styles applied to each part of the block.
        filename: Label shown after the arrow.
        line_number: 1-based number of ``line``.
        line: Line that owns the annotation.
        annotation: Annotation to render.
    """

    severity_style = stylesheet.by_severity(annotation.severity)
    digits = len(str(line_number))
    nrcol_width = digits + 2
    column = annotation.start - line.start + 1

    sink.set_style(severity_style)
    _emit(sink, f"{annotation.severity.value}:")
    if annotation.header is not None:
        _emit(sink, f" {annotation.header}\n")
    else:
        _emit(sink, "\n")

    sink.set_style(stylesheet.linenr)
    _emit(sink, " " * (digits + 1) + ARROW)
    sink.set_style(stylesheet.filename)
    _emit(sink, f"{filename}:{line_number}:{column}\n")
    sink.set_style(stylesheet.linenr)
    _emit(sink, " " * nrcol_width + f"{GUTTER}\n {line_number} {GUTTER} ")

    sink.set_style(stylesheet.content)
    sink.write(bytes(line.content_bytes))
    _emit(sink, "\n")

    sink.set_style(stylesheet.linenr)
    _emit(sink, " " * nrcol_width + GUTTER)

    if annotation.end != annotation.start:
        sink.set_style(severity_style)
        _emit(sink, " " * column + CARET * (annotation.end - annotation.start))
        if annotation.text is not None:
            _emit(sink, f" {annotation.text}")
    _emit(sink, "\n")
    sink.reset()


def render(
    entries: Iterable[tuple[int, AnnotatedLine, Annotation]],
    sink: StyledSink,
    stylesheet: Stylesheet,
    *,
    filename: str,
) -> None:
    """Render every ``(line_number, line, annotation)`` entry in order.

    The sink is reset on every exit path so that a failing write never leaves
    styling active.
    """

    try:
        for index, (line_number, line, annotation) in enumerate(entries):
            if index:
                _emit(sink, "\n")
            render_block(
                sink,
                stylesheet,
                filename=filename,
                line_number=line_number,
                line=line,
                annotation=annotation,
            )
    finally:
        sink.reset()


__all__ = ["render", "render_block"]
