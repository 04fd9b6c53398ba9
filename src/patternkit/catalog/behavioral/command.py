"""Command pattern: a remote control driving smart-home devices."""

from typing import List

from patternkit.domain.base.command import Command, Invoker
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class SmartHomeDevices:
    """Receiver: knows how to perform the actual device operations."""

    def __init__(self):
        self.actions: List[str] = []

    def _record(self, message: str) -> str:
        self.actions.append(message)
        logger.info(message)
        return message

    def turn_on_lights(self) -> str:
        return self._record("Turning on the lights.")

    def adjust_thermostat(self, temperature: float) -> str:
        return self._record(f"Adjusting thermostat to {temperature} degrees.")

    def turn_on_tv(self) -> str:
        return self._record("Turning on the smart TV.")


class TurnOnLightsCommand(Command):
    def __init__(self, devices: SmartHomeDevices):
        self.devices = devices

    def execute(self) -> str:
        return self.devices.turn_on_lights()


class AdjustThermostatCommand(Command):
    """Binds a fixed target temperature at construction."""

    def __init__(self, devices: SmartHomeDevices, temperature: float):
        self.devices = devices
        self.temperature = temperature

    def execute(self) -> str:
        return self.devices.adjust_thermostat(self.temperature)


class TurnOnTVCommand(Command):
    def __init__(self, devices: SmartHomeDevices):
        self.devices = devices

    def execute(self) -> str:
        return self.devices.turn_on_tv()


class RemoteControl(Invoker):
    """Invoker with a single programmable button."""

    def press_button(self) -> str:
        return self.invoke()
