"""Screen navigation: form, thanks, login and the HR admin view."""

import logging
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class Step(str, Enum):
    FORM = "form"
    THANKS = "thanks"
    LOGIN = "login"
    ADMIN = "admin"


class InvalidTransition(ValueError):
    pass


TRANSITIONS = {
    Step.FORM: {Step.THANKS, Step.LOGIN},
    Step.THANKS: {Step.FORM},
    Step.LOGIN: {Step.ADMIN, Step.FORM},
    Step.ADMIN: {Step.FORM},
}


class Navigator:
    """Current screen plus listeners run each time a screen is entered."""

    def __init__(self, initial: Step = Step.FORM):
        self.step = initial
        self._listeners: list[Callable[[Step], None]] = []

    def on_enter(self, listener: Callable[[Step], None]) -> None:
        self._listeners.append(listener)

    def go(self, target: Step) -> None:
        if target not in TRANSITIONS[self.step]:
            raise InvalidTransition(f"Cannot go from {self.step.value} to {target.value}")
        logger.debug(f"Navigating {self.step.value} -> {target.value}")
        self.step = target
        for listener in self._listeners:
            listener(target)
