"""Visitor: how men and women react in different situations."""

from __future__ import annotations

from abc import ABC, abstractmethod


class VisitorPerson(ABC):
    """Someone an action can visit."""

    person_type = ""

    @abstractmethod
    def accept(self, action: Action) -> str:
        """Let ``action`` describe this person."""


class Man(VisitorPerson):
    person_type = "男人"

    def accept(self, action: Action) -> str:
        return action.man_conclusion(self)


class Woman(VisitorPerson):
    person_type = "女人"

    def accept(self, action: Action) -> str:
        return action.woman_conclusion(self)


class Action(ABC):
    """A situation with a conclusion for each kind of person."""

    state = ""
    man_text = ""
    woman_text = ""

    def _line(self, person: VisitorPerson, text: str) -> str:
        return f"{person.person_type}{self.state}{text}"

    @abstractmethod
    def man_conclusion(self, person: VisitorPerson) -> str:
        """Describe a man in this situation."""

    @abstractmethod
    def woman_conclusion(self, person: VisitorPerson) -> str:
        """Describe a woman in this situation."""


class _TextAction(Action):
    def man_conclusion(self, person: VisitorPerson) -> str:
        return self._line(person, self.man_text)

    def woman_conclusion(self, person: VisitorPerson) -> str:
        return self._line(person, self.woman_text)


class Success(_TextAction):
    state = "成功"
    man_text = "时,背后多半有一个伟大的女人."
    woman_text = "时,背后大多有一个不成功的男人."


class Failing(_TextAction):
    state = "失败"
    man_text = "时,闷头喝酒，谁也不用劝."
    woman_text = "时,眼泪汪汪，谁也劝不了."


class Amativeness(_TextAction):
    state = "恋爱"
    man_text = "时,凡事不懂也要装懂."
    woman_text = "时,遇事懂也装作不懂."


class Marriage(_TextAction):
    state = "结婚"
    man_text = "时,感叹道:恋爱游戏终结时,'有妻徒刑'遥无期."
    woman_text = "时,欣慰曰:爱情长跑路漫漫,婚姻保险保平安."


class ObjectStructure:
    """The people an action is shown to, in order."""

    def __init__(self) -> None:
        self.elements: list[VisitorPerson] = []

    def attach(self, element: VisitorPerson) -> None:
        self.elements.append(element)

    def detach(self, element: VisitorPerson) -> None:
        """Remove the first registration of ``element``, if any."""
        for index, current in enumerate(self.elements):
            if current is element:
                del self.elements[index]
                return

    def display(self, action: Action) -> list[str]:
        return [element.accept(action) for element in self.elements]