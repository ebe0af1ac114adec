#!/usr/bin/env python3
"""
In-memory user directory.

A capacity-bounded, insertion-ordered list of users. Lookups are linear scans;
the directory is small enough that no index is kept.
"""

import logging
from collections.abc import Iterator

from ..core.config import DEFAULT_DIRECTORY_CAPACITY
from .models import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Bounded collection of wallet users.

    Duplicate usernames are accepted. Lookups return copies, so changes made
    to a returned user never reach the stored record.
    """

    def __init__(self, capacity: int = DEFAULT_DIRECTORY_CAPACITY):
        """
        Initialize an empty directory.

        Args:
            capacity: Maximum number of users the directory will accept
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._users: list[User] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, user: User) -> bool:
        """
        Append a user if there is room.

        Returns:
            True if the user was stored, False if the directory is full
        """
        if len(self._users) >= self._capacity:
            logger.warning(f"User directory full ({self._capacity}); rejected {user.username}")
            return False

        self._users.append(user.copy())
        logger.debug(f"Added user {user.username} ({len(self._users)}/{self._capacity})")
        return True

    def find_by_credentials(self, candidate: User) -> User | None:
        """
        Return a copy of the first user whose credentials match `candidate`.

        Returns:
            Matching user copy, or None if no stored user matches
        """
        for user in self._users:
            if user.matches_credentials(candidate):
                return user.copy()
        logger.debug(f"No user matched credentials for {candidate.username}")
        return None

    def size(self) -> int:
        return len(self._users)

    def is_full(self) -> bool:
        return len(self._users) >= self._capacity

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return (user.copy() for user in self._users)
