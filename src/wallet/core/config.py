#!/usr/bin/env python3
"""
Configuration Management for the Digital Wallet

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
from dataclasses import dataclass, is_dataclass
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .errors import ConfigurationError, InvalidAmountError
from .money import Money

DEFAULT_DIRECTORY_CAPACITY = 20

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DirectoryConfig:
    """In-memory user directory settings."""

    capacity: int = DEFAULT_DIRECTORY_CAPACITY


@dataclass
class SeedUserConfig:
    """Bootstrap user loaded into the directory at startup."""

    username: str | None = "Mohamed"
    password: str | None = "12345"
    balance: str = "2000"

    @property
    def enabled(self) -> bool:
        return bool(self.username)

    def balance_money(self) -> Money:
        """Parse the configured balance; raises InvalidAmountError."""
        return Money.parse(self.balance)


@dataclass
class Config:
    """
    Main configuration class for the wallet application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    directory: DirectoryConfig
    seed_user: SeedUserConfig

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("WALLET_ENV", "development"))

        directory = DirectoryConfig(
            capacity=_parse_int(os.getenv("WALLET_CAPACITY", str(DEFAULT_DIRECTORY_CAPACITY)), default=0),
        )

        seed_user = SeedUserConfig(
            username=os.getenv("WALLET_SEED_USERNAME", "Mohamed").strip() or None,
            password=os.getenv("WALLET_SEED_PASSWORD", "12345") or None,
            balance=os.getenv("WALLET_SEED_BALANCE", "2000"),
        )

        return cls(
            environment=env,
            directory=directory,
            seed_user=seed_user,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.directory.capacity <= 0:
            errors.append("WALLET_CAPACITY must be a positive integer")

        if self.seed_user.enabled:
            if not self.seed_user.password:
                errors.append("WALLET_SEED_PASSWORD is required when WALLET_SEED_USERNAME is provided")
            try:
                if self.seed_user.balance_money() < Money.zero():
                    errors.append("WALLET_SEED_BALANCE must be non-negative")
            except InvalidAmountError:
                errors.append(f"WALLET_SEED_BALANCE is not a valid amount: {self.seed_user.balance!r}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.WARNING)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def get_sensitive_fields(self) -> list:
        """Get list of field names that contain sensitive data."""
        return ["seed_user.password"]

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            elif is_dataclass(field_value):
                # Nested dataclass
                nested_dict: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    full_field_name = f"{field_name}.{nested_name}"

                    if not include_sensitive and full_field_name in self.get_sensitive_fields():
                        nested_dict[nested_name] = "***REDACTED***"
                    elif isinstance(nested_value, Enum):
                        nested_dict[nested_name] = nested_value.value
                    else:
                        nested_dict[nested_name] = nested_value

                result[field_name] = nested_dict
            else:
                result[field_name] = field_value

        return result


def _parse_int(value: str, default: int) -> int:
    """Parse an integer setting, returning default for malformed values."""
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return default


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ConfigurationError(errors)

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
