"""Composite: a company tree of branches and departments."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Company(ABC):
    """A node in the company tree."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def add(self, company: Company) -> None:
        """Attach a child; leaves ignore this."""

    @abstractmethod
    def remove(self, company: Company) -> None:
        """Detach a child; leaves ignore this."""

    def display(self, depth: int) -> str:
        """Return the tree, each name indented by one dash per level."""
        return "-" * depth + self.name + "\n"

    @abstractmethod
    def line_of_duty(self) -> str:
        """Return what this part of the company does, one line per department."""


class ConcreteCompany(Company):
    """A branch holding other branches and departments."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[Company] = []

    def add(self, company: Company) -> None:
        self.children.append(company)

    def remove(self, company: Company) -> None:
        self.children = [child for child in self.children if child is not company]

    def display(self, depth: int) -> str:
        return super().display(depth) + "".join(
            child.display(depth + 1) for child in self.children
        )

    def line_of_duty(self) -> str:
        return "".join(child.line_of_duty() for child in self.children)


class _Department(Company):
    duty = ""

    def add(self, company: Company) -> None:
        pass

    def remove(self, company: Company) -> None:
        pass

    def line_of_duty(self) -> str:
        return f"{self.name} {self.duty}\n"


class HRDepartment(_Department):
    duty = "公司员工培训"


class FinanceDepartment(_Department):
    duty = "公司财务收支管理"