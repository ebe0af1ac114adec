#!/usr/bin/env python3
"""
Menu State Types

Shared session record, screen identifiers and the transition request a
screen hands back to the host after each render.
"""

from dataclasses import dataclass
from enum import Enum

from ..accounts.models import User


class TransitionOutcome(Enum):
    """Loop signal returned by every screen reaction."""

    CONTINUE = "continue"
    ERROR = "error"
    EXIT = "exit"


class ScreenKind(Enum):
    """Identifiers for the wallet's screens."""

    WELCOME = "welcome"
    LOGIN = "login"
    SIGN_UP = "sign_up"
    USER_MENU = "user_menu"
    PAY_PILLS = "pay_pills"


@dataclass
class SessionState:
    """
    Mutable session shared by every screen.

    `current_user` is a copy of the directory record taken at login; balance
    changes made through it are not written back to the directory.
    """

    current_user: User | None = None
    last_outcome: TransitionOutcome = TransitionOutcome.CONTINUE

    @property
    def is_logged_in(self) -> bool:
        return self.current_user is not None

    def log_out(self) -> None:
        self.current_user = None


@dataclass(frozen=True)
class Transition:
    """
    A screen's request to the host.

    `next_screen` of None keeps the active screen in place. Naming the active
    screen's own kind replaces it with a fresh instance.
    """

    outcome: TransitionOutcome = TransitionOutcome.CONTINUE
    next_screen: ScreenKind | None = None

    @classmethod
    def stay(cls) -> "Transition":
        return cls(TransitionOutcome.CONTINUE)

    @classmethod
    def go(cls, screen: ScreenKind) -> "Transition":
        return cls(TransitionOutcome.CONTINUE, screen)

    @classmethod
    def error(cls, screen: ScreenKind | None = None) -> "Transition":
        return cls(TransitionOutcome.ERROR, screen)

    @classmethod
    def exit(cls) -> "Transition":
        return cls(TransitionOutcome.EXIT)
