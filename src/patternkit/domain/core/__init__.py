"""Core domain definitions shared by every mechanic."""

from .exceptions import (
    ConfigurationError,
    ConstructionNotAllowedError,
    DomainException,
    UnboundDelegateError,
    UnsupportedVariantError,
)

__all__ = [
    "DomainException",
    "UnsupportedVariantError",
    "UnboundDelegateError",
    "ConstructionNotAllowedError",
    "ConfigurationError",
]
