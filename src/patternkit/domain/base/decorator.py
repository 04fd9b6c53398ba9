"""Decorator - a forwarding adapter for layering behavior around one inner unit.

A concrete decorator family subclasses Decorator together with its contract:

    class CoffeeDecorator(Decorator, Coffee, contract=Coffee):
        pass

Every abstract operation of the contract that the subclass does not define
forwards to the wrapped unit, so each concrete decorator overrides only the
operations it contributes to. The wrapped unit is fixed at construction,
which makes chains acyclic: a decorator can only wrap values that already
exist.
"""

from typing import Any, Callable, ClassVar, Iterator, Optional


def _forwarding_method(name: str) -> Callable[..., Any]:
    def forward(self, *args: Any, **kwargs: Any) -> Any:
        return getattr(self._inner, name)(*args, **kwargs)

    forward.__name__ = name
    forward.__doc__ = f"Forward {name}() to the wrapped unit."
    return forward


def _forwarding_property(name: str) -> property:
    return property(lambda self: getattr(self._inner, name))


def _abstract_operations(cls: type) -> Iterator[str]:
    seen = set()
    for base in cls.__mro__[1:]:
        for name in getattr(base, "__abstractmethods__", ()):
            if name in seen:
                continue
            seen.add(name)
            attr = getattr(cls, name, None)
            if getattr(attr, "__isabstractmethod__", False):
                yield name


class Decorator:
    """
    Default-forwarding wrapper around exactly one inner unit.

    Args:
        inner: The unit to wrap. Must conform to the declared contract, if any.
    """

    contract: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, contract: Optional[type] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if contract is not None:
            cls.contract = contract
        for name in list(_abstract_operations(cls)):
            if isinstance(getattr(cls, name), property):
                setattr(cls, name, _forwarding_property(name))
            else:
                setattr(cls, name, _forwarding_method(name))

    def __init__(self, inner: Any):
        contract = type(self).contract
        if contract is not None and not isinstance(inner, contract):
            raise TypeError(
                f"{type(self).__name__} can only wrap {contract.__name__}, "
                f"got {type(inner).__name__}"
            )
        self._inner = inner

    @classmethod
    def wrap(cls, inner: Any, *args: Any, **kwargs: Any) -> "Decorator":
        """Build a new outermost unit wrapping inner."""
        return cls(inner, *args, **kwargs)

    @property
    def inner(self) -> Any:
        return self._inner

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


def compose(base: Any, *layers: Callable[[Any], Any]) -> Any:
    """
    Build a decorator chain bottom-up.

    The first layer wraps base and the last layer becomes the outermost unit,
    so compose(coffee, Milk, Whip) is Whip(Milk(coffee)).
    """
    unit = base
    for layer in layers:
        unit = layer(unit)
    return unit


def iter_layers(unit: Any) -> Iterator[Any]:
    """Yield every link of a chain from the outermost unit down to the base."""
    while isinstance(unit, Decorator):
        yield unit
        unit = unit.inner
    yield unit


def innermost(unit: Any) -> Any:
    """Return the undecorated base of a chain."""
    while isinstance(unit, Decorator):
        unit = unit.inner
    return unit


def chain_depth(unit: Any) -> int:
    """Count the decorator links wrapped around the base."""
    depth = 0
    while isinstance(unit, Decorator):
        depth += 1
        unit = unit.inner
    return depth
