# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from spanmark import AnnotationList

MANY_NEWLINES = "\nstring\nwith\nmany\n\nnewlines\n\n"


@pytest.fixture
def many_newlines() -> AnnotationList:
    """Return an empty annotation list over text with blank and trailing lines."""
    return AnnotationList("test.txt", MANY_NEWLINES)


@pytest.fixture
def hello_list() -> AnnotationList:
    """Return the greeting example with a warning and a zero-width info."""
    listing = AnnotationList("hello.txt", "Hello world!")
    listing.warning(range(4, 7), "punctuation problem", "you probably forgot a comma").info(
        range(0, 0), "consider adding some translations", None
    )
    return listing
