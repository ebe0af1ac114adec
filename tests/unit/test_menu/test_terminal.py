#!/usr/bin/env python3
"""Tests for the click-based presenter and input source."""

import click
import pytest
from click.testing import CliRunner

from wallet.core.errors import InputExhaustedError
from wallet.menu.terminal import (
    ClickInputSource,
    ClickPresenter,
    MessageSeverity,
    format_banner,
    terminal_width,
)


class TestFormatBanner:
    def test_every_line_fills_width(self):
        lines = format_banner(["Welcome To Smart Wallet"], width=40)

        assert len(lines) == 3
        assert all(len(line) == 40 for line in lines)
        assert lines[0] == "<" + "=" * 38 + ">"

    def test_message_is_centered(self):
        middle = format_banner(["hi"], width=20)[1]

        assert middle == "<=======" + " hi " + "=======>"

    def test_multi_line_banner(self):
        lines = format_banner(["one", "two"], width=30)

        assert len(lines) == 4
        assert " one " in lines[1]
        assert " two " in lines[2]

    def test_message_wider_than_frame(self):
        line = format_banner(["x" * 50], width=20)[1]

        assert line == "< " + "x" * 50 + " >"


def test_terminal_width_is_positive():
    assert terminal_width() > 0


class TestClickPresenter:
    def test_banner(self, capsys):
        ClickPresenter(width=30, color=False).print_banner("Hello")

        out = capsys.readouterr().out.splitlines()
        assert len(out) == 3
        assert " Hello " in out[1]

    @pytest.mark.parametrize(
        "severity,prefix",
        [
            (MessageSeverity.INFO, "[INFO]    "),
            (MessageSeverity.WARNING, "[WARNING] "),
            (MessageSeverity.ERROR, "[ERROR]   "),
            (MessageSeverity.SUCCESS, "[SUCCESS] "),
        ],
    )
    def test_message_prefix(self, capsys, severity, prefix):
        ClickPresenter(color=False).print_message("done", severity)

        out = capsys.readouterr().out.splitlines()
        assert out == ["-" * 70, prefix + "done", "-" * 70]

    def test_multi_line_message_prefixes_each_line(self, capsys):
        ClickPresenter(color=False).print_message("a\nb", MessageSeverity.SUCCESS)

        out = capsys.readouterr().out.splitlines()
        assert out[1:3] == ["[SUCCESS] a", "[SUCCESS] b"]

    def test_color_can_be_forced(self, capsys):
        ClickPresenter(color=True).print_message("x", MessageSeverity.ERROR)

        assert "\x1b[" in capsys.readouterr().out

    def test_print_line(self, capsys):
        ClickPresenter().print_line("(Q) Quit")
        assert capsys.readouterr().out == "(Q) Quit\n"


class TestClickInputSource:
    def test_read_token_takes_first_word(self):
        runner = CliRunner()
        with runner.isolation(input="  \nfoo bar\n"):
            assert ClickInputSource().read_token("==>") == "foo"

    def test_read_line_allows_empty(self):
        runner = CliRunner()
        with runner.isolation(input="\n"):
            assert ClickInputSource().read_line("note:") == ""

    def test_secret_token(self):
        runner = CliRunner()
        with runner.isolation(input="s3cret\n"):
            assert ClickInputSource().read_token("Enter Password:", secret=True) == "s3cret"

    def test_abort_becomes_input_exhausted(self, monkeypatch):
        def abort(*args, **kwargs):
            raise click.exceptions.Abort()

        monkeypatch.setattr(click, "prompt", abort)

        with pytest.raises(InputExhaustedError):
            ClickInputSource().read_token("==>")
        with pytest.raises(InputExhaustedError):
            ClickInputSource().read_line("==>")
