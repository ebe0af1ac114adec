#!/usr/bin/env python3
"""Tests for the bounded in-memory user directory."""

import pytest

from wallet.accounts.directory import UserDirectory
from wallet.accounts.models import User
from wallet.core.config import DirectoryConfig
from wallet.core.money import Money


def make_user(name: str, password: str = "pw", dollars: int = 0) -> User:
    return User(username=name, password=password, balance=Money.from_dollars(dollars))


class TestAdd:
    def test_default_capacity_matches_configuration(self):
        assert UserDirectory().capacity == DirectoryConfig().capacity == 20

    def test_size_grows_until_capacity(self):
        directory = UserDirectory(capacity=3)

        for expected_size, name in enumerate(["a", "b", "c"], start=1):
            assert directory.add(make_user(name)) is True
            assert directory.size() == expected_size

        assert directory.is_full()
        assert directory.add(make_user("d")) is False
        assert directory.add(make_user("e")) is False
        assert directory.size() == 3

    def test_capacity_one(self):
        directory = UserDirectory(capacity=1)

        assert directory.add(make_user("userA")) is True
        assert directory.add(make_user("userB")) is False
        assert directory.size() == 1
        assert directory.find_by_credentials(User.from_credentials("userB", "pw")) is None

    def test_zero_capacity_rejects_everything(self):
        directory = UserDirectory(capacity=0)
        assert directory.add(make_user("a")) is False
        assert len(directory) == 0

    def test_negative_capacity_is_invalid(self):
        with pytest.raises(ValueError):
            UserDirectory(capacity=-1)

    def test_duplicate_usernames_are_accepted(self):
        directory = UserDirectory(capacity=3)
        assert directory.add(make_user("bob", "one"))
        assert directory.add(make_user("bob", "one"))
        assert directory.size() == 2

    def test_add_stores_a_copy(self):
        directory = UserDirectory(capacity=1)
        user = make_user("bob", dollars=10)
        directory.add(user)

        user.deposit(Money.from_dollars(5))

        stored = directory.find_by_credentials(User.from_credentials("bob", "pw"))
        assert stored.balance == Money.from_dollars(10)


class TestFindByCredentials:
    def test_returns_copy_equal_by_value(self):
        directory = UserDirectory(capacity=2)
        directory.add(make_user("bob", "pw1", 100))

        found = directory.find_by_credentials(User.from_credentials("bob", "pw1"))

        assert found == make_user("bob", "pw1")
        assert found.username == "bob"
        assert found.balance == Money.from_dollars(100)

    def test_changes_to_result_do_not_reach_directory(self):
        directory = UserDirectory(capacity=2)
        directory.add(make_user("bob", "pw1", 100))

        found = directory.find_by_credentials(User.from_credentials("bob", "pw1"))
        found.withdraw(Money.from_dollars(60))

        again = directory.find_by_credentials(User.from_credentials("bob", "pw1"))
        assert again.balance == Money.from_dollars(100)

    @pytest.mark.parametrize(
        "username,password",
        [("bob", "wrong"), ("bobby", "pw1"), ("", ""), ("pw1", "bob")],
    )
    def test_non_matching_returns_none(self, username, password):
        directory = UserDirectory(capacity=2)
        directory.add(make_user("bob", "pw1"))

        assert directory.find_by_credentials(User.from_credentials(username, password)) is None

    def test_first_match_in_insertion_order_wins(self):
        directory = UserDirectory(capacity=3)
        directory.add(make_user("bob", "pw1", 1))
        directory.add(make_user("bob", "pw1", 2))

        found = directory.find_by_credentials(User.from_credentials("bob", "pw1"))
        assert found.balance == Money.from_dollars(1)

    def test_same_username_different_passwords(self):
        directory = UserDirectory(capacity=3)
        directory.add(make_user("bob", "first", 1))
        directory.add(make_user("bob", "second", 2))

        found = directory.find_by_credentials(User.from_credentials("bob", "second"))
        assert found.balance == Money.from_dollars(2)

    def test_empty_directory(self):
        assert UserDirectory().find_by_credentials(User.from_credentials("a", "b")) is None


def test_iteration_preserves_insertion_order():
    directory = UserDirectory(capacity=3)
    for name in ["carol", "alice", "bob"]:
        directory.add(make_user(name))

    assert [user.username for user in directory] == ["carol", "alice", "bob"]
