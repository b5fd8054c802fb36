"""Memento: saving and restoring a game character's state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoleStateMemento:
    stamina: int
    aggressivity: int
    defense: int


class GameCharacter:
    """A character whose stats can be saved and recovered."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.stamina = 0
        self.aggressivity = 0
        self.defense = 0

    def init_state(self) -> None:
        self.stamina = 100
        self.aggressivity = 100
        self.defense = 100

    def fight(self) -> None:
        self.stamina = 0
        self.aggressivity = 0
        self.defense = 0

    def state_display(self) -> str:
        return (
            f"角色:{self.name}\n体力值:{self.stamina}\n"
            f"攻击力:{self.aggressivity}\n防御力:{self.defense}\n"
        )

    def save_state(self) -> RoleStateMemento:
        return RoleStateMemento(self.stamina, self.aggressivity, self.defense)

    def recover_state(self, memento: RoleStateMemento) -> None:
        self.stamina = memento.stamina
        self.aggressivity = memento.aggressivity
        self.defense = memento.defense


@dataclass
class RoleStateCaretaker:
    """Keeps one saved state."""

    memento: RoleStateMemento | None = None