"""Adapter: a translator lets a foreign player follow the team's calls."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Player(ABC):
    """A team member who can attack and defend."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def attack(self) -> str:
        """Return the attack call."""

    @abstractmethod
    def defence(self) -> str:
        """Return the defence call."""


class _Positioned(Player):
    position = ""

    def attack(self) -> str:
        return f"{self.position} {self.name} 冲锋"

    def defence(self) -> str:
        return f"{self.position} {self.name} 防守"


class Forward(_Positioned):
    position = "前锋"


class Center(_Positioned):
    position = "中锋"


class Guard(_Positioned):
    position = "后卫"


class ForeignCenter:
    """A player with an interface of its own."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def attack_cn(self) -> str:
        return f"外籍中锋 {self.name} 冲锋"

    def defence_cn(self) -> str:
        return f"外籍中锋 {self.name} 防守"


class Translator(Player):
    """Presents a foreign center as an ordinary player."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.center = ForeignCenter(name)

    def attack(self) -> str:
        return self.center.attack_cn()

    def defence(self) -> str:
        return self.center.defence_cn()