"""
Core Utilities Package

Shared primitives used across the wallet.

This package provides:
- Currency parsing and formatting with integer cents
- The immutable Money type
- Environment-driven configuration
- Wallet exception types
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import cents_to_dollars_str, format_cents, is_valid_currency_string, parse_dollars_to_cents
from .errors import ConfigurationError, InputExhaustedError, InvalidAmountError, WalletError
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "ConfigurationError",
    "Environment",
    "InputExhaustedError",
    "InvalidAmountError",
    "Money",
    "WalletError",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "is_valid_currency_string",
    "parse_dollars_to_cents",
    "reload_config",
]
