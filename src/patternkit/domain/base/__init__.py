"""Pluggable-behavior mechanics shared by every pattern in the catalog."""

from .command import Command, Invoker
from .decorator import Decorator, chain_depth, compose, innermost, iter_layers
from .factory import AbstractFactory, Creator, VariantFactory
from .holder import Holder
from .subject import Subject, Subscriber

__all__ = [
    "Holder",
    "Command",
    "Invoker",
    "Decorator",
    "compose",
    "iter_layers",
    "innermost",
    "chain_depth",
    "Subject",
    "Subscriber",
    "VariantFactory",
    "Creator",
    "AbstractFactory",
]
