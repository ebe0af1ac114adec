#!/usr/bin/env python3
"""
Wallet Screens

Each screen renders itself, reads input, mutates the session or directory as
needed, and returns a `Transition` describing where the loop goes next. The
outgoing edges of the state machine live in the screen that owns them.
"""

import logging
from abc import ABC, abstractmethod

from ..accounts.directory import UserDirectory
from ..accounts.models import User
from ..core.errors import InvalidAmountError
from ..core.money import Money
from .state import ScreenKind, SessionState, Transition
from .terminal import InputSource, MessageSeverity, Presenter

logger = logging.getLogger(__name__)


class Screen(ABC):
    """
    Abstract base class for wallet screens.

    Screens are transient: the host builds a new instance whenever a
    transition targets a screen and drops it once replaced.
    """

    kind: ScreenKind

    def __init__(self, presenter: Presenter, input_source: InputSource):
        self.presenter = presenter
        self.input = input_source

    @abstractmethod
    def render_and_react(self, session: SessionState) -> Transition:
        """
        Draw the screen, read the user's choice and act on it.

        Args:
            session: Shared session state, mutated in place

        Returns:
            Transition for the host to apply
        """
        pass

    def read_amount(self, prompt: str) -> Money | None:
        """Read an amount, printing an error and returning None if it does not parse."""
        raw = self.input.read_token(prompt)
        try:
            return Money.parse(raw)
        except InvalidAmountError:
            logger.debug(f"Rejected unparseable amount {raw!r} on {self.kind.value}")
            self.presenter.print_message("Invalid Value", MessageSeverity.ERROR)
            return None

    def require_user(self, session: SessionState) -> User | None:
        """Return the logged-in user, reporting an error if there is none."""
        if session.current_user is None:
            logger.warning(f"{self.kind.value} screen reached without a logged-in user")
            self.presenter.print_message("No user is currently logged in.", MessageSeverity.ERROR)
        return session.current_user


class WelcomeScreen(Screen):
    kind = ScreenKind.WELCOME

    def render_and_react(self, session: SessionState) -> Transition:
        self.presenter.clear()
        self.presenter.print_banner("Welcome To Smart Wallet")
        self.presenter.print_message("Login Page", MessageSeverity.INFO)
        self.presenter.print_line("Please Make a Selection:")
        self.presenter.print_line("(S) Sign Up")
        self.presenter.print_line("(L) Login")
        self.presenter.print_line("(Q) Quit")

        query = self.input.read_token("==>")

        if query in ("L", "l"):
            return Transition.go(ScreenKind.LOGIN)
        if query in ("S", "s"):
            return Transition.go(ScreenKind.SIGN_UP)
        if query in ("Q", "q"):
            self.presenter.print_message("Goodbye!", MessageSeverity.INFO)
            return Transition.exit()

        self.presenter.print_message("Invalid selection. Please try again.", MessageSeverity.WARNING)
        return Transition.error()


class LoginScreen(Screen):
    kind = ScreenKind.LOGIN

    def __init__(self, presenter: Presenter, input_source: InputSource, directory: UserDirectory):
        super().__init__(presenter, input_source)
        self.directory = directory

    def render_and_react(self, session: SessionState) -> Transition:
        self.presenter.clear()
        self.presenter.print_message("Login Page::Enter Login Credentials", MessageSeverity.INFO)
        username = self.input.read_token("Please enter user name:")
        password = self.input.read_token("Enter Password:", secret=True)

        found = self.directory.find_by_credentials(User.from_credentials(username, password))
        if found is not None:
            logger.info(f"User {found.username} logged in")
            session.current_user = found
            self.presenter.clear()
            self.presenter.print_banner(f"Welcome {found.username}")
            return Transition.go(ScreenKind.USER_MENU)

        logger.info(f"Failed login attempt for {username}")
        self.presenter.print_message("Invalid username or password.", MessageSeverity.ERROR)
        choice = self.input.read_token("[R]etry or [Q]uit?")
        if choice[:1] in ("q", "Q"):
            self.presenter.print_message("Login cancelled.", MessageSeverity.WARNING)
            session.log_out()
            return Transition.go(ScreenKind.WELCOME)

        return Transition.stay()


class SignUpScreen(Screen):
    kind = ScreenKind.SIGN_UP

    def __init__(self, presenter: Presenter, input_source: InputSource, directory: UserDirectory):
        super().__init__(presenter, input_source)
        self.directory = directory

    def render_and_react(self, session: SessionState) -> Transition:
        self.presenter.clear()
        self.presenter.print_message("Sign-Up Page::Enter Login Credentials", MessageSeverity.INFO)
        username = self.input.read_token("Please enter user name:")
        password = self.input.read_token("Enter Password:", secret=True)
        confirmation = self.input.read_token("Confirm Password:", secret=True)

        if password != confirmation:
            self.presenter.print_message("ERROR::Password Didn't Match", MessageSeverity.ERROR)
            return Transition.go(ScreenKind.SIGN_UP)

        initial_balance = self.read_amount("Enter Initial Balance:")
        if initial_balance is None:
            return Transition.go(ScreenKind.SIGN_UP)
        if initial_balance < Money.zero():
            self.presenter.print_message("Invalid Value", MessageSeverity.ERROR)
            return Transition.go(ScreenKind.SIGN_UP)

        new_user = User(username=username, password=password)
        new_user.deposit(initial_balance)

        if self.directory.add(new_user):
            self.presenter.print_message(f"User: {username} Created Successfully", MessageSeverity.SUCCESS)
        else:
            self.presenter.print_message(
                f"User directory is full; {username} was not created", MessageSeverity.WARNING
            )

        return Transition.go(ScreenKind.LOGIN)


class UserMenuScreen(Screen):
    kind = ScreenKind.USER_MENU

    def render_and_react(self, session: SessionState) -> Transition:
        user = self.require_user(session)
        if user is None:
            return Transition.error(ScreenKind.WELCOME)

        self.presenter.print_line("Please Make a Selection")
        self.presenter.print_line("[1] View balance")
        self.presenter.print_line("[2] Withdraw")
        self.presenter.print_line("[3] Deposit")
        self.presenter.print_line("[4] Pay Bills")
        self.presenter.print_line("[5] Logout")

        query = self.input.read_token("==>")

        if query == "1":
            self.presenter.print_message(f"Your Balance: {user.balance}", MessageSeverity.INFO)
        elif query == "2":
            self._withdraw(user)
        elif query == "3":
            self._deposit(user)
        elif query == "4":
            return Transition.go(ScreenKind.PAY_PILLS)
        elif query == "5":
            logger.info(f"User {user.username} logged out")
            session.log_out()
            self.presenter.print_message("Logged Out", MessageSeverity.INFO)
            return Transition.go(ScreenKind.WELCOME)
        else:
            self.presenter.print_message("Invalid selection", MessageSeverity.WARNING)

        return Transition.stay()

    def _withdraw(self, user: User) -> None:
        amount = self.read_amount("Enter a value to withdraw:")
        if amount is None:
            return
        if not amount.is_positive():
            self.presenter.print_message("Invalid Value", MessageSeverity.ERROR)
            return

        if user.withdraw(amount):
            self.presenter.print_message(
                f"Withdrawn Successfully\nYour new balance: {user.balance}", MessageSeverity.SUCCESS
            )
        else:
            self.presenter.print_message("ERROR::Insufficient Balance", MessageSeverity.ERROR)

    def _deposit(self, user: User) -> None:
        amount = self.read_amount("Enter a value to deposit:")
        if amount is None:
            return
        if not amount.is_positive():
            self.presenter.print_message("Invalid Value", MessageSeverity.ERROR)
            return

        user.deposit(amount)
        self.presenter.print_message(
            f"Deposited Successfully\nYour new balance: {user.balance}", MessageSeverity.SUCCESS
        )


class PayPillsScreen(Screen):
    """
    Bill payment screen.

    Only mobile recharge is implemented; any selection other than recharge or
    back ends the session loop.
    """

    kind = ScreenKind.PAY_PILLS

    def render_and_react(self, session: SessionState) -> Transition:
        user = self.require_user(session)
        if user is None:
            return Transition.error(ScreenKind.WELCOME)

        self.presenter.clear()
        self.presenter.print_message("Pay Your Bills Here", MessageSeverity.INFO)
        self.presenter.print_line("[1] Recharge Mobile")
        self.presenter.print_line("[2] Pay Electricity Bills")
        self.presenter.print_line("[3] Pay College Fees")
        self.presenter.print_line("[4] Back")

        query = self.input.read_token("Please Make a Selection:")

        if query == "1":
            number = self.input.read_token("Enter Mobile Number:")
            amount = self.read_amount("Enter Recharge Amount:")
            if amount is None:
                return Transition.stay()
            # No positivity guard here; withdraw's own balance check is the only one.
            if user.withdraw(amount):
                self.presenter.print_message(
                    f"{number} Recharged with amount {amount} Successfully", MessageSeverity.SUCCESS
                )
            else:
                self.presenter.print_message("ERROR::Insufficient Balance", MessageSeverity.ERROR)
            return Transition.stay()

        if query == "4":
            return Transition.go(ScreenKind.USER_MENU)

        self.presenter.print_message("Goodbye!", MessageSeverity.INFO)
        return Transition.exit()


def build_screen(
    kind: ScreenKind,
    presenter: Presenter,
    input_source: InputSource,
    directory: UserDirectory,
) -> Screen:
    """Construct a fresh screen of the given kind."""
    if kind == ScreenKind.WELCOME:
        return WelcomeScreen(presenter, input_source)
    if kind == ScreenKind.LOGIN:
        return LoginScreen(presenter, input_source, directory)
    if kind == ScreenKind.SIGN_UP:
        return SignUpScreen(presenter, input_source, directory)
    if kind == ScreenKind.USER_MENU:
        return UserMenuScreen(presenter, input_source)
    if kind == ScreenKind.PAY_PILLS:
        return PayPillsScreen(presenter, input_source)
    raise ValueError(f"Unknown screen kind: {kind!r}")
