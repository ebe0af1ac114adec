#!/usr/bin/env python3
"""
Console Presenter and Input Source

Screens depend only on the `Presenter` and `InputSource` protocols. The
click-based implementations here are what the `wallet` command uses; tests
substitute scripted fakes.
"""

import shutil
from enum import Enum
from typing import Protocol

import click

from ..core.errors import InputExhaustedError

DEFAULT_TERMINAL_WIDTH = 80
MESSAGE_RULE_WIDTH = 70


class MessageSeverity(Enum):
    """Severity levels for presenter messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


_PREFIXES = {
    MessageSeverity.INFO: "[INFO]    ",
    MessageSeverity.WARNING: "[WARNING] ",
    MessageSeverity.ERROR: "[ERROR]   ",
    MessageSeverity.SUCCESS: "[SUCCESS] ",
}

_COLORS = {
    MessageSeverity.INFO: "cyan",
    MessageSeverity.WARNING: "yellow",
    MessageSeverity.ERROR: "red",
    MessageSeverity.SUCCESS: "green",
}


class Presenter(Protocol):
    """Output capability used by screens."""

    def print_banner(self, text: str | list[str]) -> None:
        """Print a framed banner with one centered line per message."""
        ...

    def print_message(self, text: str, severity: MessageSeverity = MessageSeverity.INFO) -> None:
        """Print a single status message."""
        ...

    def print_line(self, text: str = "") -> None:
        """Print plain text such as menu options."""
        ...

    def clear(self) -> None:
        """Clear the screen, where the output device supports it."""
        ...


class InputSource(Protocol):
    """Input capability used by screens."""

    def read_token(self, prompt: str, secret: bool = False) -> str:
        """
        Read one non-empty, whitespace-free token.

        Raises:
            InputExhaustedError: If input has ended
        """
        ...

    def read_line(self, prompt: str) -> str:
        """
        Read a full line, which may be empty.

        Raises:
            InputExhaustedError: If input has ended
        """
        ...


def terminal_width() -> int:
    """Current terminal width, falling back to 80 columns."""
    width = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
    return width if width > 0 else DEFAULT_TERMINAL_WIDTH


def format_banner(messages: list[str], width: int, fill: str = "=") -> list[str]:
    """
    Lay out a banner as lines of exactly `width` characters.

    Messages too wide for the frame are printed without padding.
    """
    border = "<" + fill * (width - 2) + ">"
    lines = [border]
    for message in messages:
        padding = max((width - 2 - len(message) - 2) // 2, 0)
        trailing = width - 2 - padding - len(message) - 2
        lines.append("<" + fill * padding + " " + message + " " + fill * trailing + ">")
    lines.append(border)
    return lines


class ClickPresenter:
    """Presenter writing to stdout through click."""

    def __init__(self, width: int | None = None, color: bool | None = None):
        """
        Args:
            width: Fixed banner width; detected from the terminal when None
            color: Force styling on or off; click decides when None
        """
        self._width = width
        self._color = color

    def print_banner(self, text: str | list[str]) -> None:
        messages = [text] if isinstance(text, str) else list(text)
        width = self._width or terminal_width()
        for line in format_banner(messages, width):
            click.echo(line, color=self._color)

    def print_message(self, text: str, severity: MessageSeverity = MessageSeverity.INFO) -> None:
        rule = "-" * MESSAGE_RULE_WIDTH
        click.echo(rule, color=self._color)
        prefix = click.style(_PREFIXES[severity], fg=_COLORS[severity], bold=True)
        for line in text.splitlines() or [""]:
            click.echo(prefix + line, color=self._color)
        click.echo(rule, color=self._color)

    def print_line(self, text: str = "") -> None:
        click.echo(text, color=self._color)

    def clear(self) -> None:
        click.clear()


class ClickInputSource:
    """Input source reading prompts through click."""

    def read_token(self, prompt: str, secret: bool = False) -> str:
        while True:
            try:
                value = click.prompt(prompt, prompt_suffix=" ", hide_input=secret, type=str)
            except click.exceptions.Abort as e:
                raise InputExhaustedError("input closed") from e
            tokens = value.split()
            if tokens:
                return tokens[0]

    def read_line(self, prompt: str) -> str:
        try:
            return click.prompt(prompt, prompt_suffix=" ", default="", show_default=False, type=str)
        except click.exceptions.Abort as e:
            raise InputExhaustedError("input closed") from e
