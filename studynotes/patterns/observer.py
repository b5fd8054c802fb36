"""Observer: staff who are told when the boss comes and goes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO


def _out(stream: TextIO | None) -> TextIO:
    return stream if stream is not None else sys.stdout


class Observer(ABC):
    """Something that wants to hear about events."""

    @abstractmethod
    def update(self, event: str) -> None:
        """React to ``event``."""


class StockObserver(Observer):
    """Writes a line naming itself and the event it heard."""

    def __init__(self, name: str, stream: TextIO | None = None) -> None:
        self.name = name
        self.stream = stream

    def update(self, event: str) -> None:
        _out(self.stream).write(f"{self.name} get {event} call!!\n")


class Boss:
    """Publishes events to its observers in the order they were added."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def del_observer(self, observer: Observer) -> None:
        """Remove every registration of ``observer``; unknown observers are ignored."""
        self._observers = [ob for ob in self._observers if ob is not observer]

    def notify(self, event: str) -> int:
        """Tell every observer about ``event`` and return how many there are."""
        for observer in list(self._observers):
            observer.update(event)
        return len(self._observers)

    def come(self) -> int:
        _out(self.stream).write("Boss : hello boys ,I come in\n")
        return self.notify("Boss come")

    def leave(self) -> int:
        _out(self.stream).write("Boss : Good bye boys\n")
        return self.notify("Boss leave")