"""Chain of responsibility: requests pass up a line of managers."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class RequestType(enum.IntEnum):
    VACATION = 0
    RAISES = 1


@dataclass
class Request:
    kind: RequestType
    description: str
    num: int


class Manager(ABC):
    """Handles a request or hands it to a superior."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.superior: Manager | None = None

    def set_superior(self, manager: Manager) -> None:
        self.superior = manager

    def _approve(self, request: Request) -> str:
        return f"{self.name}: 批准 {request.description} {request.num}"

    def _pass_up(self, request: Request) -> str | None:
        return self.superior.handle(request) if self.superior is not None else None

    @abstractmethod
    def handle(self, request: Request) -> str | None:
        """Return the decision, or None if nobody in the chain decided."""


class HRManager(Manager):
    def handle(self, request: Request) -> str | None:
        if request.kind == RequestType.VACATION and request.num < 5:
            return self._approve(request)
        return self._pass_up(request)


class CommonManager(Manager):
    def handle(self, request: Request) -> str | None:
        if request.kind == RequestType.VACATION and request.num <= 10:
            return self._approve(request)
        return self._pass_up(request)


class GeneralManager(Manager):
    def handle(self, request: Request) -> str | None:
        if request.kind == RequestType.VACATION:
            return self._approve(request)
        if request.kind == RequestType.RAISES:
            if request.num <= 500:
                return self._approve(request)
            return (
                f"{self.name}: 不批准 {request.description} {request.num} 进步不明显,继续努力"
            )
        return None