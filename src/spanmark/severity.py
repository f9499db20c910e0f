# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity levels attached to annotations."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Classify an annotation and select its display style."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


__all__ = ["Severity"]
