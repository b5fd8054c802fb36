"""Facade: one object that drives several subsystems."""

from __future__ import annotations


class SubSystemOne:
    def method_one(self) -> str:
        return "子系统方法一"


class SubSystemTwo:
    def method_two(self) -> str:
        return "子系统方法二"


class SubSystemThree:
    def method_three(self) -> str:
        return "子系统方法三"


class SubSystemFour:
    def method_four(self) -> str:
        return "子系统方法四"


def _group(title: str, lines: list[str]) -> str:
    return f"\n{title}\n" + "".join(f"{line}\n" for line in lines)


class Facade:
    """Offers two grouped calls over the four subsystems."""

    def __init__(self) -> None:
        self.one = SubSystemOne()
        self.two = SubSystemTwo()
        self.three = SubSystemThree()
        self.four = SubSystemFour()

    def method_a(self) -> str:
        return _group(
            "方法组一",
            [self.one.method_one(), self.two.method_two(), self.four.method_four()],
        )

    def method_b(self) -> str:
        return _group("方法组二", [self.two.method_two(), self.three.method_three()])