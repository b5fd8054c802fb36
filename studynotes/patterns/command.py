"""Command: a waiter queues orders for the cook."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

BEEF_SOLD_OUT = "牛肉串没了"


class Cooking:
    def cook_beef(self) -> str:
        return "烤牛肉串"

    def cook_chicken(self) -> str:
        return "烤鸡腿"


class Command(ABC):
    """An order bound to the cook who carries it out."""

    def __init__(self, cook: Cooking) -> None:
        self.cook = cook

    @abstractmethod
    def execute(self) -> Any:
        """Carry out the order."""


class BeefCommand(Command):
    def execute(self) -> str:
        return self.cook.cook_beef()


class ChickenCommand(Command):
    def execute(self) -> str:
        return self.cook.cook_chicken()


class Waiter:
    """Takes orders and passes them on together."""

    def __init__(self) -> None:
        self.orders: list[Command] = []

    def set_order(self, command: Command) -> bool:
        """Queue ``command``; beef is sold out, so a beef order is refused."""
        if type(command) is BeefCommand:
            return False
        self.orders.append(command)
        return True

    def cancel_order(self, command: Command) -> None:
        """Drop every queued copy of ``command``."""
        self.orders = [order for order in self.orders if order is not command]

    def notify(self) -> list[Any]:
        """Execute every queued order in turn and return the results."""
        return [order.execute() for order in self.orders]