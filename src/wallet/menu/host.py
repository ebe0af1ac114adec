#!/usr/bin/env python3
"""
Screen Host

Owns the single active screen and drives the display loop. Screens decide
their own outgoing transitions; the host only applies them.
"""

import logging

import click

from ..accounts.directory import UserDirectory
from ..core.errors import InputExhaustedError
from .screens import Screen, build_screen
from .state import ScreenKind, SessionState, Transition, TransitionOutcome
from .terminal import InputSource, Presenter

logger = logging.getLogger(__name__)


class ScreenHost:
    """
    Driver of the wallet state machine.

    Holds exactly one active screen. Replacing it builds the new screen first
    and then releases the old one, so the slot is never empty.
    """

    def __init__(
        self,
        directory: UserDirectory,
        session: SessionState,
        presenter: Presenter,
        input_source: InputSource,
        initial_screen: ScreenKind = ScreenKind.WELCOME,
        emit_markers: bool = False,
    ):
        """
        Initialize the host with its starting screen.

        Args:
            directory: User directory handed to screens that need it
            session: Session state shared with every screen
            presenter: Output capability for screens
            input_source: Input capability for screens
            initial_screen: Screen active before the first render
            emit_markers: Write a `[SCREEN: <kind>]` line to stderr before
                each render (used by interactive end-to-end tests)
        """
        self.directory = directory
        self.session = session
        self.presenter = presenter
        self.input_source = input_source
        self.emit_markers = emit_markers
        self._active: Screen = build_screen(initial_screen, presenter, input_source, directory)

    @property
    def active_screen(self) -> Screen:
        return self._active

    def set_active_screen(self, kind: ScreenKind) -> Screen:
        """Replace the active screen with a new instance of `kind`."""
        screen = build_screen(kind, self.presenter, self.input_source, self.directory)
        previous = self._active
        self._active = screen
        logger.debug(f"Screen transition: {previous.kind.value} -> {kind.value}")
        return screen

    def apply(self, transition: Transition) -> TransitionOutcome:
        """Apply a screen's transition request and record its outcome."""
        if transition.next_screen is not None:
            self.set_active_screen(transition.next_screen)

        if transition.outcome != self.session.last_outcome:
            logger.debug(f"Outcome changed: {self.session.last_outcome.value} -> {transition.outcome.value}")
        self.session.last_outcome = transition.outcome
        return transition.outcome

    def step(self) -> TransitionOutcome:
        """Run one render/react cycle of the active screen."""
        if self.emit_markers:
            click.echo(f"[SCREEN: {self._active.kind.value}]", err=True)

        transition = self._active.render_and_react(self.session)
        return self.apply(transition)

    def run_loop(self) -> TransitionOutcome:
        """
        Run screens until one requests exit.

        Input running out ends the loop the same way an explicit quit does.

        Returns:
            The final outcome, always EXIT
        """
        outcome = self.session.last_outcome
        try:
            while True:
                outcome = self.step()
                if outcome == TransitionOutcome.EXIT:
                    break
        except InputExhaustedError:
            logger.info(f"Input exhausted on {self._active.kind.value} screen; exiting")
            outcome = self.apply(Transition.exit())

        return outcome
