"""Decorator: toppings on a dish, and clothes on a person."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Food(ABC):
    """A dish with a price and a description."""

    price: float = 0.0

    @abstractmethod
    def describe(self) -> str:
        """Return the name of the dish with its toppings."""


class FoodRice(Food):
    price = 2.5

    def describe(self) -> str:
        return "米饭"


class FoodNoodle(Food):
    price = 6.6

    def describe(self) -> str:
        return "面条"


class FoodDecorator(Food):
    """Wraps a dish; the plain wrapper adds nothing."""

    topping = ""
    extra = 0.0

    def __init__(self, food: Food) -> None:
        self.food = food

    @property
    def price(self) -> float:  # type: ignore[override]
        return self.food.price + self.extra

    def describe(self) -> str:
        return self.food.describe() + self.topping


class EggDecorator(FoodDecorator):
    topping = "+鸡蛋"
    extra = 0.5


class BeefDecorator(FoodDecorator):
    topping = "+牛肉"
    extra = 10.0


class HamDecorator(FoodDecorator):
    topping = "+火腿"
    extra = 5.0


class Person:
    """Someone to be dressed."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def show(self) -> str:
        return f"装饰的{self.name}"


class Finery(Person):
    """A garment worn over another person or garment."""

    label = ""

    def __init__(self) -> None:
        super().__init__()
        self.person: Person | None = None

    def decorate(self, person: Person) -> None:
        self.person = person

    def show(self) -> str:
        inner = self.person.show() if self.person is not None else ""
        return self.label + inner


class TShirt(Finery):
    label = "白T恤 "


class Jeans(Finery):
    label = "牛仔裤 "