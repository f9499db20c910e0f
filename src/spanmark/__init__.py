# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compiler-style annotations over byte ranges of a source text."""

from __future__ import annotations

from importlib import metadata

from .annotation import Annotation
from .annotation_list import AnnotationList
from .config import RenderConfig, load_render_config
from .console import ColorChoice
from .errors import (
    AfterStringEndError,
    AnnotationError,
    ConfigError,
    InvalidRangeError,
    MultilineRangeError,
)
from .lines import AnnotatedLine
from .severity import Severity
from .sinks import AnsiBufferSink, PlainBufferSink, StyledSink
from .stylesheet import Stylesheet

__all__ = [
    "AfterStringEndError",
    "AnnotatedLine",
    "Annotation",
    "AnnotationError",
    "AnnotationList",
    "AnsiBufferSink",
    "ColorChoice",
    "ConfigError",
    "InvalidRangeError",
    "MultilineRangeError",
    "PlainBufferSink",
    "RenderConfig",
    "Severity",
    "StyledSink",
    "Stylesheet",
    "__version__",
    "load_render_config",
]

try:
    __version__ = metadata.version("spanmark")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
