"""Structural patterns: Decorator."""

from .decorator import (
    Coffee,
    CoffeeDecorator,
    CondimentDecorator,
    MilkDecorator,
    SimpleCoffee,
    WhipDecorator,
)

__all__ = [
    "Coffee",
    "SimpleCoffee",
    "CoffeeDecorator",
    "CondimentDecorator",
    "MilkDecorator",
    "WhipDecorator",
]
