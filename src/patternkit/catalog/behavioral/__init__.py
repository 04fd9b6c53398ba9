"""Behavioral patterns: Command, Observer, Strategy."""

from .command import (
    AdjustThermostatCommand,
    RemoteControl,
    SmartHomeDevices,
    TurnOnLightsCommand,
    TurnOnTVCommand,
)
from .observer import NewsPublisher, NewsSubscriber
from .strategy import CreditCardPayment, PaymentStrategy, PayPalPayment, ShoppingCart

__all__ = [
    "SmartHomeDevices",
    "TurnOnLightsCommand",
    "AdjustThermostatCommand",
    "TurnOnTVCommand",
    "RemoteControl",
    "NewsPublisher",
    "NewsSubscriber",
    "PaymentStrategy",
    "CreditCardPayment",
    "PayPalPayment",
    "ShoppingCart",
]
