"""Builder: a director assembles products from builders' parts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product:
    """A list of parts."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def show(self) -> str:
        return "产品：\n" + "".join(f"{part} " for part in self.parts) + "\n\n"


class Builder(ABC):
    """Adds parts to the product it owns."""

    def __init__(self) -> None:
        self._product = Product()

    @abstractmethod
    def build_part_a(self) -> None:
        """Add the first part."""

    @abstractmethod
    def build_part_b(self) -> None:
        """Add the second part."""

    def result(self) -> Product:
        return self._product


class BuilderA(Builder):
    def build_part_a(self) -> None:
        self._product.add("部件A")

    def build_part_b(self) -> None:
        self._product.add("部件B")


class BuilderB(Builder):
    def build_part_a(self) -> None:
        self._product.add("部件X")

    def build_part_b(self) -> None:
        self._product.add("部件Y")


class Director:
    """Drives a builder through the building steps in order."""

    def construct(self, builder: Builder) -> Product:
        builder.build_part_a()
        builder.build_part_b()
        return builder.result()