"""Factory method: factories for people who help out."""

from __future__ import annotations

from abc import ABC, abstractmethod


class LeiFeng(ABC):
    """Someone who sweeps, washes and buys rice."""

    @property
    @abstractmethod
    def role(self) -> str:
        """Who is doing the work."""

    def sweep(self) -> str:
        return f"{self.role}-扫地"

    def wash(self) -> str:
        return f"{self.role}-洗衣"

    def buy_rice(self) -> str:
        return f"{self.role}-买米"


class Student(LeiFeng):
    @property
    def role(self) -> str:
        return "学生"


class Volunteer(LeiFeng):
    @property
    def role(self) -> str:
        return "志愿者"


class LeiFengFactory(ABC):
    @abstractmethod
    def create(self) -> LeiFeng:
        """Return a new helper."""


class StudentFactory(LeiFengFactory):
    def create(self) -> LeiFeng:
        return Student()


class VolunteerFactory(LeiFengFactory):
    def create(self) -> LeiFeng:
        return Volunteer()