"""Strategy pattern: interchangeable payment methods for a shopping cart."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from patternkit.domain.base.holder import Holder
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class PaymentStrategy(ABC):
    """Port implemented by every payment method."""

    name: str = "payment"

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Pay amount and return a confirmation."""


class CreditCardPayment(PaymentStrategy):
    name = "Credit Card"

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} using Credit Card Payment."


class PayPalPayment(PaymentStrategy):
    name = "PayPal"

    def pay(self, amount: float) -> str:
        return f"Paid {amount:.2f} using PayPal Payment."


class ShoppingCart(Holder[PaymentStrategy]):
    """Context: holds the items and whichever payment strategy is active."""

    def __init__(self, payment_strategy: Optional[PaymentStrategy] = None):
        super().__init__(contract=PaymentStrategy, operation="pay", unit=payment_strategy)
        self._items: Dict[str, float] = {}

    def add_item(self, name: str, price: float) -> None:
        if price < 0:
            raise ValueError(f"Price of {name} must not be negative")
        self._items[name] = self._items.get(name, 0.0) + price

    @property
    def total(self) -> float:
        return sum(self._items.values())

    def set_payment_strategy(self, payment_strategy: PaymentStrategy) -> None:
        self.set_active(payment_strategy)

    def make_payment(self) -> str:
        """Pay the cart total with the active strategy."""
        confirmation = self.invoke(self.total)
        logger.info(confirmation, strategy=self.active.name)
        return confirmation
