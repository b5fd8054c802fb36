"""Proxy: a go-between sends gifts on behalf of the suitor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SchoolGirl:
    name: str = ""


class Boy:
    """The suitor who sends the gifts."""

    def __init__(self, girl: SchoolGirl) -> None:
        self.girl = girl

    def send_flowers(self) -> str:
        return f"{self.girl.name} 送你花"

    def send_chocolate(self) -> str:
        return f"{self.girl.name} 送你巧克力"

    def send_milk(self) -> str:
        return f"{self.girl.name} 送你牛奶"


class Bulb:
    """Stands in for the suitor, passing every gift through him."""

    def __init__(self, girl: SchoolGirl) -> None:
        self._boy = Boy(girl)

    def send_flowers(self) -> str:
        return self._boy.send_flowers()

    def send_chocolate(self) -> str:
        return self._boy.send_chocolate()

    def send_milk(self) -> str:
        return self._boy.send_milk()