"""Factory Method: each creator subclass decides which vehicle to build."""

from patternkit.domain.base.factory import Creator

from .factory import Bicycle, Car, Truck, Vehicle


class VehicleCreator(Creator[Vehicle]):
    """Creator whose operations work against whatever create() returns."""

    def start_driving(self) -> str:
        vehicle = self.create()
        return vehicle.drive()


class CarCreator(VehicleCreator):
    def create(self) -> Vehicle:
        return Car()


class BicycleCreator(VehicleCreator):
    def create(self) -> Vehicle:
        return Bicycle()


class TruckCreator(VehicleCreator):
    def create(self) -> Vehicle:
        return Truck()
