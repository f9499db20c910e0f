# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for standard stream output and colour detection."""

import io
import re

import pytest
from rich.color import ColorSystem

from spanmark import AnnotationList, ColorChoice
from spanmark.console import ansi_color_system, console_for, detect_tty

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class _BrokenStream(io.StringIO):
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


def test_detect_tty() -> None:
    assert detect_tty(_TtyStream()) is True
    assert detect_tty(io.StringIO()) is False
    assert detect_tty(_BrokenStream()) is False


def test_color_choice_resolution() -> None:
    assert ColorChoice.ALWAYS.resolve(io.StringIO()) is True
    assert ColorChoice.NEVER.resolve(_TtyStream()) is False
    assert ColorChoice.AUTO.resolve(_TtyStream()) is True
    assert ColorChoice.AUTO.resolve(io.StringIO()) is False


def test_console_for_plain_stream() -> None:
    console = console_for(io.StringIO(), color=False)

    assert console.color_system is None
    assert not console.is_terminal


def test_show_stdout_is_plain_when_not_a_terminal(hello_list: AnnotationList, capsys: pytest.CaptureFixture[str]) -> None:
    hello_list.show_stdout()

    captured = capsys.readouterr()
    assert captured.out == hello_list.to_string()
    assert captured.err == ""


def test_show_stderr_is_plain_when_not_a_terminal(hello_list: AnnotationList, capsys: pytest.CaptureFixture[str]) -> None:
    hello_list.show_stderr()

    captured = capsys.readouterr()
    assert captured.err == hello_list.to_string()
    assert captured.out == ""


def test_show_stream_colours_when_forced(hello_list: AnnotationList, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.delenv("COLORTERM", raising=False)
    stream = io.StringIO()

    hello_list.show_stream(stream, color="always")

    assert "\x1b[" in stream.getvalue()


def test_show_stream_auto_colours_terminals(hello_list: AnnotationList, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm")
    stream = _TtyStream()

    hello_list.show_stream(stream)

    assert "\x1b[" in stream.getvalue()


def test_show_stream_never_colours(hello_list: AnnotationList) -> None:
    stream = _TtyStream()

    hello_list.show_stream(stream, color=ColorChoice.NEVER)

    assert stream.getvalue() == hello_list.to_string()


def test_ansi_color_system_follows_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.delenv("COLORTERM", raising=False)

    assert ansi_color_system(console_for(io.StringIO(), color=False)) is None
    assert ansi_color_system(console_for(io.StringIO(), color=True)) is ColorSystem.STANDARD


@pytest.fixture
def tab_list() -> AnnotationList:
    return AnnotationList("t.txt", "\tx = 1\r").error(range(1, 2), "bad", "here")


def test_show_stream_keeps_tabs_and_carriage_returns(tab_list: AnnotationList) -> None:
    stream = io.StringIO()

    tab_list.show_stream(stream, color="never")

    assert stream.getvalue() == tab_list.to_string()
    assert " 1 | \tx = 1\r\n" in stream.getvalue()


def test_coloured_show_stream_keeps_raw_content(tab_list: AnnotationList, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm")
    monkeypatch.delenv("COLORTERM", raising=False)
    stream = _TtyStream()

    tab_list.show_stream(stream)

    output = stream.getvalue()
    assert output == tab_list.to_ansi_string()
    assert ANSI_ESCAPE.sub("", output) == tab_list.to_string()
