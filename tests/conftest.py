"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from tests.fixtures.scripted_io import RecordingPresenter, ScriptedInput
from wallet.accounts.directory import UserDirectory
from wallet.accounts.models import User
from wallet.core.money import Money
from wallet.menu.host import ScreenHost
from wallet.menu.state import SessionState


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and a fresh configuration cache."""
    monkeypatch.setenv("WALLET_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("WALLET_CAPACITY", "20")
    monkeypatch.setenv("WALLET_SEED_USERNAME", "Mohamed")
    monkeypatch.setenv("WALLET_SEED_PASSWORD", "12345")
    monkeypatch.setenv("WALLET_SEED_BALANCE", "2000")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr("wallet.core.config._config", None)


@pytest.fixture
def presenter() -> RecordingPresenter:
    """Presenter that records output."""
    return RecordingPresenter()


@pytest.fixture
def bob() -> User:
    """User bob/pw1 with a $100.00 balance."""
    return User(username="bob", password="pw1", balance=Money.from_dollars(100))


@pytest.fixture
def directory(bob) -> UserDirectory:
    """Directory holding bob."""
    users = UserDirectory(capacity=5)
    users.add(bob)
    return users


@pytest.fixture
def session() -> SessionState:
    """Empty session."""
    return SessionState()


@pytest.fixture
def logged_in_session(directory, bob) -> SessionState:
    """Session with bob logged in, as the login screen would leave it."""
    return SessionState(current_user=directory.find_by_credentials(bob))


@pytest.fixture
def make_host(directory, session, presenter):
    """Factory for a ScreenHost fed by scripted input."""

    def _make(*responses: str, **kwargs) -> ScreenHost:
        return ScreenHost(directory, session, presenter, ScriptedInput(*responses), **kwargs)

    return _make


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "e2e: End-to-end tests driving the real console script")
