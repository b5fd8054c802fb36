"""Abstract factory: storage back ends for students and teachers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass
class Student:
    ident: int = 0
    name: str = ""


@dataclass
class Teacher:
    ident: int = 0
    name: str = ""


_R = TypeVar("_R", Student, Teacher)


class _Store(Generic[_R]):
    def __init__(self) -> None:
        self._records: list[_R] = []

    def _add(self, record: _R) -> None:
        self._records.append(record)

    def _find(self, ident: int) -> _R | None:
        return next((record for record in self._records if record.ident == ident), None)


class StudentSQL(ABC):
    @abstractmethod
    def insert(self, student: Student) -> None:
        """Store ``student``."""

    @abstractmethod
    def get_student(self, ident: int) -> Student | None:
        """Return the first student with ``ident``, or None."""


class TeacherSQL(ABC):
    @abstractmethod
    def insert(self, teacher: Teacher) -> None:
        """Store ``teacher``."""

    @abstractmethod
    def get_teacher(self, ident: int) -> Teacher | None:
        """Return the first teacher with ``ident``, or None."""


class SQLServerStudent(StudentSQL, _Store[Student]):
    def insert(self, student: Student) -> None:
        self._add(student)

    def get_student(self, ident: int) -> Student | None:
        return self._find(ident)


class AccessStudent(StudentSQL, _Store[Student]):
    def insert(self, student: Student) -> None:
        self._add(student)

    def get_student(self, ident: int) -> Student | None:
        return self._find(ident)


class SQLServerTeacher(TeacherSQL, _Store[Teacher]):
    def insert(self, teacher: Teacher) -> None:
        self._add(teacher)

    def get_teacher(self, ident: int) -> Teacher | None:
        return self._find(ident)


class AccessTeacher(TeacherSQL, _Store[Teacher]):
    def insert(self, teacher: Teacher) -> None:
        self._add(teacher)

    def get_teacher(self, ident: int) -> Teacher | None:
        return self._find(ident)


class SQLFactory(ABC):
    @abstractmethod
    def create_student_sql(self) -> StudentSQL:
        """Return a new student store."""

    @abstractmethod
    def create_teacher_sql(self) -> TeacherSQL:
        """Return a new teacher store."""


class SQLServerFactory(SQLFactory):
    def create_student_sql(self) -> StudentSQL:
        return SQLServerStudent()

    def create_teacher_sql(self) -> TeacherSQL:
        return SQLServerTeacher()


class AccessFactory(SQLFactory):
    def create_student_sql(self) -> StudentSQL:
        return AccessStudent()

    def create_teacher_sql(self) -> TeacherSQL:
        return AccessTeacher()