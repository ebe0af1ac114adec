"""
Menu Package

The interactive state machine: screens, the shared session record and the
host that owns the active screen and runs the display loop.
"""

from .host import ScreenHost
from .screens import (
    LoginScreen,
    PayPillsScreen,
    Screen,
    SignUpScreen,
    UserMenuScreen,
    WelcomeScreen,
    build_screen,
)
from .state import ScreenKind, SessionState, Transition, TransitionOutcome
from .terminal import ClickInputSource, ClickPresenter, InputSource, MessageSeverity, Presenter

__all__ = [
    "ClickInputSource",
    "ClickPresenter",
    "InputSource",
    "LoginScreen",
    "MessageSeverity",
    "PayPillsScreen",
    "Presenter",
    "Screen",
    "ScreenHost",
    "ScreenKind",
    "SessionState",
    "SignUpScreen",
    "Transition",
    "TransitionOutcome",
    "UserMenuScreen",
    "WelcomeScreen",
    "build_screen",
]
