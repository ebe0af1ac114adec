#!/usr/bin/env python3
"""
Application Wiring

Builds the user directory, session and screen host from configuration and
runs the interactive loop.
"""

import logging

from .accounts.directory import UserDirectory
from .accounts.models import User
from .core.config import Config, Environment, SeedUserConfig
from .menu.host import ScreenHost
from .menu.state import SessionState, TransitionOutcome
from .menu.terminal import ClickInputSource, ClickPresenter, InputSource, Presenter

logger = logging.getLogger(__name__)


def seed_directory(directory: UserDirectory, seed: SeedUserConfig) -> User | None:
    """
    Add the configured bootstrap user to the directory.

    Returns:
        The seeded user, or None if seeding is disabled or the directory is full
    """
    if not seed.enabled or not seed.password:
        return None

    user = User(username=seed.username or "", password=seed.password)
    user.deposit(seed.balance_money())
    if not directory.add(user):
        return None

    logger.debug(f"Seeded user {user.username} with balance {user.balance}")
    return user


class Application:
    """Wires a directory, a session and a screen host together."""

    def __init__(
        self,
        directory: UserDirectory,
        session: SessionState,
        presenter: Presenter,
        input_source: InputSource,
        emit_markers: bool = False,
    ):
        self.directory = directory
        self.session = session
        self.host = ScreenHost(directory, session, presenter, input_source, emit_markers=emit_markers)

    @classmethod
    def from_config(
        cls,
        config: Config,
        presenter: Presenter | None = None,
        input_source: InputSource | None = None,
    ) -> "Application":
        """Create an application with a seeded directory and console I/O."""
        directory = UserDirectory(config.directory.capacity)
        seed_directory(directory, config.seed_user)

        return cls(
            directory,
            SessionState(),
            presenter or ClickPresenter(),
            input_source or ClickInputSource(),
            emit_markers=config.environment == Environment.TEST,
        )

    def run(self) -> TransitionOutcome:
        """Run the display loop until exit."""
        logger.debug(f"Starting wallet with {self.directory.size()} user(s)")
        return self.host.run_loop()
