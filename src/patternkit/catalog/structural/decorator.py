"""Decorator pattern: priced coffee with stacked condiments."""

from abc import ABC, abstractmethod
from typing import ClassVar

from patternkit.domain.base.decorator import Decorator


class Coffee(ABC):
    @abstractmethod
    def get_cost(self) -> float:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def get_cost(self) -> float:
        return 2.0

    def get_description(self) -> str:
        return "Simple Coffee"


class CoffeeDecorator(Decorator, Coffee, contract=Coffee):
    """Forwards every Coffee operation to the wrapped coffee unchanged."""


class CondimentDecorator(CoffeeDecorator):
    """Adds a fixed cost and appends its name, after the wrapped coffee."""

    condiment: ClassVar[str] = ""
    cost: ClassVar[float] = 0.0

    def get_cost(self) -> float:
        return self.inner.get_cost() + self.cost

    def get_description(self) -> str:
        return f"{self.inner.get_description()}, {self.condiment}"


class MilkDecorator(CondimentDecorator):
    condiment = "Milk"
    cost = 1.0


class WhipDecorator(CondimentDecorator):
    condiment = "Whip"
    cost = 0.5
