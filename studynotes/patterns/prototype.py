"""Prototype: copying a resume and changing the copy."""

from __future__ import annotations

import copy


class Resume:
    """A short resume that can be cloned."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.sex = ""
        self.age = ""
        self.time_area = ""
        self.company = ""

    def set_personal_info(self, sex: str, age: str) -> None:
        self.sex = sex
        self.age = age

    def set_work_experience(self, time_area: str, company: str) -> None:
        self.time_area = time_area
        self.company = company

    def display(self) -> str:
        return (
            f"{self.name} {self.sex} {self.age} 工作经历: {self.time_area} {self.company}"
        )

    def clone(self) -> Resume:
        """Return an independent copy."""
        return copy.copy(self)