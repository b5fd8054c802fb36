"""Mediator: countries talk to each other only through a council."""

from __future__ import annotations

from abc import ABC, abstractmethod


class UnitedNations(ABC):
    """Passes messages between countries."""

    @abstractmethod
    def declare(self, message: str, country: Country) -> str | None:
        """Deliver ``message`` from ``country`` and return what the receiver made of it."""


class Country(ABC):
    """A country that speaks through a mediator."""

    def __init__(self, mediator: UnitedNations) -> None:
        self.mediator = mediator

    def declare(self, message: str) -> str | None:
        return self.mediator.declare(message, self)

    @abstractmethod
    def receive(self, message: str) -> str:
        """Return how this country reports a message it received."""


class USA(Country):
    def receive(self, message: str) -> str:
        return f"美国获得对方消息：{message}"


class Iraq(Country):
    def receive(self, message: str) -> str:
        return f"伊拉克获得对方消息：{message}"


class SecurityCouncil(UnitedNations):
    """Forwards each side's message to the other side."""

    def __init__(self) -> None:
        self.usa: USA | None = None
        self.iraq: Iraq | None = None

    def set_usa(self, usa: USA) -> None:
        self.usa = usa

    def set_iraq(self, iraq: Iraq) -> None:
        self.iraq = iraq

    def declare(self, message: str, country: Country) -> str | None:
        """Deliver to the other party; a sender the council does not know gets None."""
        if country is self.usa and self.iraq is not None:
            return self.iraq.receive(message)
        if country is self.iraq and self.usa is not None:
            return self.usa.receive(message)
        return None