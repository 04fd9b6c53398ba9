"""Factory indirection: selector-based, factory-method and family factories."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, List, Mapping, Type, TypeVar, Union

from patternkit.domain.core.exceptions import ConfigurationError, UnsupportedVariantError
from patternkit.infrastructure.logging.logger import get_logger

E = TypeVar("E", bound=Enum)
T = TypeVar("T")


class VariantFactory(Generic[E, T]):
    """
    Maps a closed enumeration of variants to constructors.

    Every member of variant_type must have a constructor; a partial mapping is
    rejected when the factory is built, so create() never meets a known
    variant it cannot construct.

    Args:
        variant_type: The Enum listing the supported variants
        constructors: Constructor callable for each variant
    """

    def __init__(self, variant_type: Type[E], constructors: Mapping[E, Callable[..., T]]):
        missing = [variant.value for variant in variant_type if variant not in constructors]
        if missing:
            raise ConfigurationError(
                f"{type(self).__name__} has no constructor for variants: {missing}",
                missing_fields=[str(value) for value in missing],
            )
        self._variant_type = variant_type
        self._constructors: Dict[E, Callable[..., T]] = dict(constructors)
        self.logger = get_logger(__name__)

    @property
    def variants(self) -> List[E]:
        return list(self._variant_type)

    def resolve(self, selector: Union[E, str]) -> E:
        """
        Resolve a selector to its variant.

        Args:
            selector: A variant member or its value

        Returns:
            The matching variant

        Raises:
            UnsupportedVariantError: If selector names no variant
        """
        if isinstance(selector, self._variant_type):
            return selector
        try:
            return self._variant_type(selector)
        except ValueError:
            supported = [variant.value for variant in self._variant_type]
            self.logger.warning(
                "Unsupported variant requested",
                factory=type(self).__name__,
                selector=str(selector),
            )
            raise UnsupportedVariantError(selector, supported) from None

    def create(self, selector: Union[E, str], *args: Any, **kwargs: Any) -> T:
        """
        Construct a new unit for selector.

        Raises:
            UnsupportedVariantError: If selector names no variant
        """
        variant = self.resolve(selector)
        unit = self._constructors[variant](*args, **kwargs)
        self.logger.debug(
            "Unit created",
            factory=type(self).__name__,
            variant=variant.value,
            unit=type(unit).__name__,
        )
        return unit

    def supports(self, selector: Any) -> bool:
        if isinstance(selector, self._variant_type):
            return True
        try:
            self._variant_type(selector)
        except ValueError:
            return False
        return True


class Creator(ABC, Generic[T]):
    """Factory method: subclasses decide which concrete product create() returns."""

    @abstractmethod
    def create(self) -> T:
        """The factory method."""


class AbstractFactory(ABC):
    """
    A factory producing one family of compatible products.

    Concrete factories set ``family``; every product they build carries the
    same tag. Compatibility is guaranteed by which factory built the parts,
    not by a runtime check.
    """

    family: ClassVar[str] = ""

    def __init__(self):
        if not getattr(type(self), "family", None):
            raise ConfigurationError(f"{type(self).__name__} does not declare a product family")
