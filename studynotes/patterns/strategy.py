"""Strategy: the ways a till may charge for a purchase."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

NORMAL = 0
RETURN = 1
REBATE = 2


class CashPolicy(ABC):
    """How much to charge for a given amount."""

    @abstractmethod
    def accept_cash(self, money: float) -> float:
        """Return the amount charged for ``money``."""


class CashNormal(CashPolicy):
    """Charge the full amount."""

    def accept_cash(self, money: float) -> float:
        return money


class CashReturn(CashPolicy):
    """Give ``refund`` back for every whole ``condition`` spent."""

    def __init__(self, condition: float, refund: float) -> None:
        self.condition = condition
        self.refund = refund

    def accept_cash(self, money: float) -> float:
        if money >= self.condition:
            return money - math.floor(money / self.condition) * self.refund
        return money


class CashRebate(CashPolicy):
    """Charge a fixed fraction of the amount."""

    def __init__(self, rebate: float) -> None:
        self.rebate = rebate

    def accept_cash(self, money: float) -> float:
        return money * self.rebate


class CashContext:
    """Holds the discount settings and the policy built from them."""

    def __init__(self) -> None:
        self.discount = 1.0
        self.amount = 0.0
        self.return_amount = 0.0
        self.policy: CashPolicy | None = None

    def set_discount(self, discount: float) -> None:
        self.discount = discount

    def set_return(self, amount: float, return_amount: float) -> None:
        self.amount = amount
        self.return_amount = return_amount

    def create(self, policy: int) -> CashPolicy:
        """Build the policy of type NORMAL, RETURN or REBATE from the current settings."""
        if policy == NORMAL:
            self.policy = CashNormal()
        elif policy == RETURN:
            self.policy = CashReturn(self.amount, self.return_amount)
        elif policy == REBATE:
            self.policy = CashRebate(self.discount)
        else:
            raise ValueError(f"unknown cash policy {policy!r}")
        return self.policy

    def result(self, money: float) -> float:
        if self.policy is None:
            raise RuntimeError("no cash policy has been created")
        return self.policy.accept_cash(money)