"""patternkit - Root Package.

A catalog of classic object-oriented design patterns (Command, Observer,
Strategy, Factory, Factory Method, Abstract Factory, Singleton, Decorator)
built on a small set of pluggable-behavior mechanics.

Key Components:
    - domain: the mechanics (Holder, Invoker, Decorator, Subject, factories)
      and the error taxonomy
    - infrastructure: structured logging and the singleton registry
    - config: validated application configuration
    - catalog: concrete pattern demonstrations

Usage:
    >>> from patternkit.catalog.structural import MilkDecorator, SimpleCoffee, WhipDecorator
    >>> coffee = WhipDecorator(MilkDecorator(SimpleCoffee()))
    >>> coffee.get_cost()
    3.5
"""

from ._version import __version__
from .domain.base import (
    AbstractFactory,
    Command,
    Creator,
    Decorator,
    Holder,
    Invoker,
    Subject,
    Subscriber,
    VariantFactory,
    compose,
)
from .domain.core.exceptions import (
    ConfigurationError,
    ConstructionNotAllowedError,
    DomainException,
    UnboundDelegateError,
    UnsupportedVariantError,
)
from .infrastructure.patterns import Singleton, get_singleton

__all__ = [
    "__version__",
    "Holder",
    "Command",
    "Invoker",
    "Decorator",
    "compose",
    "Subject",
    "Subscriber",
    "VariantFactory",
    "Creator",
    "AbstractFactory",
    "Singleton",
    "get_singleton",
    "DomainException",
    "UnsupportedVariantError",
    "UnboundDelegateError",
    "ConstructionNotAllowedError",
    "ConfigurationError",
]
