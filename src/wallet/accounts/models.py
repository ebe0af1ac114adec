#!/usr/bin/env python3
"""
Wallet account models.

A `User` is a plain value record. Copies are taken with `copy()` wherever a
caller must not share state with the directory's stored record.
"""

import logging
from dataclasses import dataclass, field, replace

from ..core.money import Money

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class User:
    """
    Wallet user with credentials and a balance.

    Equality compares the (username, password) pair only; two records with the
    same credentials but different balances are equal.
    """

    username: str
    password: str = field(repr=False)
    balance: Money = field(default_factory=Money.zero)

    @classmethod
    def from_credentials(cls, username: str, password: str) -> "User":
        """Build a lookup candidate carrying only credentials."""
        return cls(username=username, password=password)

    def deposit(self, amount: Money) -> None:
        """
        Add `amount` to the balance.

        No positivity check is made here; callers validate user input first.
        """
        self.balance = self.balance + amount

    def withdraw(self, amount: Money) -> bool:
        """
        Subtract `amount` from the balance.

        Returns:
            False (balance unchanged) if `amount` exceeds the balance,
            True otherwise
        """
        if amount > self.balance:
            logger.debug(f"Withdrawal of {amount} rejected for {self.username}: balance {self.balance}")
            return False
        self.balance = self.balance - amount
        return True

    def matches_credentials(self, other: "User") -> bool:
        return self.username == other.username and self.password == other.password

    def copy(self) -> "User":
        return replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.matches_credentials(other)

    def __hash__(self) -> int:
        return hash((self.username, self.password))
