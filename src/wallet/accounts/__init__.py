"""
Accounts Package

Wallet users and the capacity-bounded in-memory directory that stores them.
"""

from .directory import UserDirectory
from .models import User

__all__ = ["User", "UserDirectory"]
