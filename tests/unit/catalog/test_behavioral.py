"""Tests for the behavioral pattern catalog."""

import pytest

from patternkit.catalog.behavioral import (
    AdjustThermostatCommand,
    CreditCardPayment,
    NewsPublisher,
    NewsSubscriber,
    PayPalPayment,
    RemoteControl,
    ShoppingCart,
    SmartHomeDevices,
    TurnOnLightsCommand,
    TurnOnTVCommand,
)
from patternkit.domain.core.exceptions import UnboundDelegateError


class TestRemoteControl:
    """Test cases for the Command demonstration."""

    def setup_method(self):
        """Set up test fixtures."""
        self.devices = SmartHomeDevices()
        self.remote = RemoteControl()

    def test_press_button_runs_each_programmed_command(self):
        """Test that the remote drives the receiver through whichever command is set."""
        outputs = []
        for command in (
            TurnOnLightsCommand(self.devices),
            AdjustThermostatCommand(self.devices, 22),
            TurnOnTVCommand(self.devices),
        ):
            self.remote.set_command(command)
            outputs.append(self.remote.press_button())

        assert outputs == [
            "Turning on the lights.",
            "Adjusting thermostat to 22 degrees.",
            "Turning on the smart TV.",
        ]
        assert self.devices.actions == outputs
        assert len(self.remote.history) == 3

    def test_press_button_without_command(self):
        with pytest.raises(UnboundDelegateError):
            self.remote.press_button()

        assert self.devices.actions == []


class TestNewsPublisher:
    """Test cases for the Observer demonstration."""

    def test_subscribers_receive_article_in_order(self):
        """Test delivery to Alice then Bob."""
        publisher = NewsPublisher()
        alice = NewsSubscriber("Alice")
        bob = NewsSubscriber("Bob")
        publisher.attach(alice)
        publisher.attach(bob)

        publisher.publish_article("Intro to Patterns")

        assert publisher.latest_article == "Intro to Patterns"
        assert alice.messages == ["Hey Alice, a new article is published: 'Intro to Patterns'"]
        assert bob.messages == ["Hey Bob, a new article is published: 'Intro to Patterns'"]

    def test_detached_subscriber_misses_later_articles(self):
        publisher = NewsPublisher()
        alice = NewsSubscriber("Alice")
        bob = NewsSubscriber("Bob")
        publisher.attach(alice)
        publisher.attach(bob)

        publisher.publish_article("First")
        publisher.detach(bob)
        publisher.publish_article("Second")

        assert len(alice.messages) == 2
        assert bob.messages == ["Hey Bob, a new article is published: 'First'"]


class TestShoppingCart:
    """Test cases for the Strategy demonstration."""

    def test_payment_strategy_can_be_swapped(self):
        cart = ShoppingCart()
        cart.add_item("book", 12.5)
        cart.add_item("pen", 2.0)

        cart.set_payment_strategy(PayPalPayment())
        paypal = cart.make_payment()
        cart.set_payment_strategy(CreditCardPayment())
        card = cart.make_payment()

        assert paypal == "Paid 14.50 using PayPal Payment."
        assert card == "Paid 14.50 using Credit Card Payment."

    def test_payment_without_strategy(self):
        cart = ShoppingCart()
        cart.add_item("book", 12.5)

        with pytest.raises(UnboundDelegateError):
            cart.make_payment()

    def test_initial_strategy(self):
        cart = ShoppingCart(CreditCardPayment())

        assert cart.make_payment() == "Paid 0.00 using Credit Card Payment."

    def test_negative_price_rejected(self):
        cart = ShoppingCart()

        with pytest.raises(ValueError):
            cart.add_item("refund", -1.0)

        assert cart.total == 0.0
