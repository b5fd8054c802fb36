"""Simple factory: arithmetic operations chosen by their symbol."""

from __future__ import annotations

DIVIDE_BY_ZERO_MESSAGE = "除数不能为0 "


class Operation:
    """A binary operation on two numbers; the plain operation yields 0."""

    def __init__(self, number_a: float = 0.0, number_b: float = 0.0) -> None:
        self.number_a = number_a
        self.number_b = number_b

    def result(self) -> float:
        return 0.0


class OperationAdd(Operation):
    def result(self) -> float:
        return self.number_a + self.number_b


class OperationSub(Operation):
    def result(self) -> float:
        return self.number_a - self.number_b


class OperationMul(Operation):
    def result(self) -> float:
        return self.number_a * self.number_b


class OperationDiv(Operation):
    def result(self) -> float:
        if self.number_b == 0:
            raise ZeroDivisionError(DIVIDE_BY_ZERO_MESSAGE)
        return self.number_a / self.number_b


_OPERATIONS: dict[str, type[Operation]] = {
    "+": OperationAdd,
    "-": OperationSub,
    "*": OperationMul,
    "/": OperationDiv,
}


def create_operation(symbol: str) -> Operation:
    """Return a new operation for ``+``, ``-``, ``*`` or ``/`` with both numbers 0."""
    try:
        return _OPERATIONS[symbol]()
    except KeyError:
        raise ValueError(f"unknown operation {symbol!r}") from None