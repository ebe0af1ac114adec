"""
Digital Wallet - Interactive Console Wallet

A small console wallet driven by a screen state machine: sign up, log in,
view balance, deposit, withdraw and pay bills against an in-memory user
directory.

Domain Packages:
- core: Money type, currency parsing, configuration, exceptions
- accounts: User records and the bounded user directory
- menu: Screens, session state and the screen host
- cli: Command-line entry point

Example Usage:
    from wallet.accounts import User, UserDirectory
    from wallet.core import Money

    directory = UserDirectory(capacity=10)
    directory.add(User("bob", "pw1", Money.from_dollars(100)))
"""

__version__ = "0.1.0"
__author__ = "Digital Wallet Developers"

from .accounts.directory import UserDirectory
from .accounts.models import User
from .core.config import Environment, get_config
from .core.money import Money

__all__ = [
    "Environment",
    "Money",
    "User",
    "UserDirectory",
    "get_config",
]
