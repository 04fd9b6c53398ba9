# src/patternkit/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all patternkit errors."""
    pass


class UnsupportedVariantError(DomainException):
    """Raised when a factory receives a selector it does not recognize."""
    def __init__(self, selector: Any, supported: Optional[Iterable[Any]] = None):
        self.selector = selector
        self.supported = list(supported or [])
        super().__init__(
            f"Unsupported variant '{selector}'. Supported variants: {self.supported}"
        )


class UnboundDelegateError(DomainException):
    """Raised when a holder is invoked before any unit was set."""
    def __init__(self, holder: str, operation: Optional[str] = None):
        self.holder = holder
        self.operation = operation
        target = f"'{operation}' on " if operation else ""
        super().__init__(f"Cannot invoke {target}{holder}: no active unit has been set")


class ConstructionNotAllowedError(DomainException):
    """Raised when a restricted singleton is constructed outside its accessor."""
    def __init__(self, class_name: str, reason: Optional[str] = None):
        self.class_name = class_name
        self.reason = reason
        if reason:
            message = f"{class_name} cannot be constructed: {reason}"
        else:
            message = f"{class_name} cannot be constructed directly; use {class_name}.get_instance()"
        super().__init__(message)


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
