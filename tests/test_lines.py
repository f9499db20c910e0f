# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the line index."""

import pytest

from spanmark import Annotation, AnnotationList, MultilineRangeError
from spanmark.lines import LineIndex, SourceText, line_boundaries

MANY_NEWLINES = "\nstring\nwith\nmany\n\nnewlines\n\n"


def _starts_and_contents(listing: AnnotationList) -> list[tuple[int, str]]:
    return [(line.start, line.content) for line in listing.annotated_lines()]


def test_lines_preserve_offsets(many_newlines: AnnotationList) -> None:
    assert _starts_and_contents(many_newlines) == [
        (0, ""),
        (1, "string"),
        (8, "with"),
        (13, "many"),
        (18, ""),
        (19, "newlines"),
        (28, ""),
        (29, ""),
    ]


def test_empty_text_has_one_empty_line() -> None:
    assert _starts_and_contents(AnnotationList("empty.txt", "")) == [(0, "")]


def test_text_without_trailing_newline() -> None:
    assert _starts_and_contents(AnnotationList("a.txt", "one\ntwo")) == [(0, "one"), (4, "two")]


def test_trailing_newline_adds_final_empty_line() -> None:
    assert _starts_and_contents(AnnotationList("a.txt", "one\n")) == [(0, "one"), (4, "")]


def test_boundaries_pair_newline_offsets() -> None:
    assert line_boundaries(b"ab\ncd") == [0, 2, 3, 5]
    assert line_boundaries(b"\n") == [0, 0, 1, 1]


def test_offsets_count_utf8_bytes() -> None:
    listing = AnnotationList("u.txt", "héllo\nwörld")

    assert _starts_and_contents(listing) == [(0, "héllo"), (7, "wörld")]
    assert listing.annotated_lines()[1].length == len("wörld".encode("utf-8"))


def test_locate_finds_last_start_not_exceeding_offset() -> None:
    index = LineIndex(SourceText.from_text(MANY_NEWLINES))

    assert index.starts == (0, 1, 8, 13, 18, 19, 28, 29)
    assert index.locate(0) == 0
    assert index.locate(1) == 1
    assert index.locate(7) == 1
    assert index.locate(13) == 3
    assert index.locate(1000) == 7


def test_line_add_checks_length_only() -> None:
    line = AnnotationList("a.txt", "ab\ncdefgh").annotated_lines()[0]

    line.add(Annotation.info(range(1, 3)))
    with pytest.raises(MultilineRangeError):
        line.add(Annotation.info(range(0, 3)))

    assert line.annotations == [Annotation.info(range(1, 3))]


def test_line_content_is_not_copied(many_newlines: AnnotationList) -> None:
    line = many_newlines.annotated_lines()[1]

    assert line.content_bytes.obj is line.source.data
    assert line.end == 7
