"""Factory and Simple Factory: vehicles built from a selector."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from patternkit.domain.base.factory import VariantFactory
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Vehicle(ABC):
    """Product port."""

    kind: str = "vehicle"

    @abstractmethod
    def drive(self) -> str:
        """Drive the vehicle and describe it."""


class Car(Vehicle):
    kind = "car"

    def drive(self) -> str:
        logger.info("Driving a car...")
        return "Driving a car..."


class Bicycle(Vehicle):
    kind = "bike"

    def drive(self) -> str:
        logger.info("Riding a bicycle...")
        return "Riding a bicycle..."


class Truck(Vehicle):
    kind = "truck"

    def drive(self) -> str:
        logger.info("Driving a truck...")
        return "Driving a truck..."


class VehicleType(str, Enum):
    """Vehicle variants the factory knows how to build."""
    CAR = "car"
    BIKE = "bike"
    TRUCK = "truck"


class VehicleFactory(VariantFactory[VehicleType, Vehicle]):
    """Centralized factory: one create() call, the selector picks the class."""

    def __init__(self):
        super().__init__(
            VehicleType,
            {
                VehicleType.CAR: Car,
                VehicleType.BIKE: Bicycle,
                VehicleType.TRUCK: Truck,
            },
        )

    def create_vehicle(self, vehicle_type: Union[VehicleType, str]) -> Vehicle:
        return self.create(vehicle_type)


_default_factory = VehicleFactory()


def create_vehicle(vehicle_type: Union[VehicleType, str]) -> Vehicle:
    """
    Simple factory function.

    Raises:
        UnsupportedVariantError: If vehicle_type is not a known vehicle
    """
    return _default_factory.create(vehicle_type)
