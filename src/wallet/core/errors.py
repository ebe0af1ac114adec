#!/usr/bin/env python3
"""
Wallet Exception Types

Only conditions that cannot be reported through a return value are raised as
exceptions. Capacity exhaustion, failed lookups and insufficient funds are
plain return values handled by the screens.
"""


class WalletError(Exception):
    """Base class for all wallet errors."""


class InvalidAmountError(WalletError, ValueError):
    """Raised when user-entered text cannot be parsed as a currency amount."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid amount: {raw!r}")


class InputExhaustedError(WalletError, EOFError):
    """Raised by an input source when no more input can be read."""


class ConfigurationError(WalletError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")
