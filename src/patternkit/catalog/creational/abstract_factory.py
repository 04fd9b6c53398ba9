"""Abstract Factory: families of vehicle parts that fit together."""

from abc import ABC, abstractmethod

from patternkit.domain.base.factory import AbstractFactory


class Engine(ABC):
    family: str = ""

    @abstractmethod
    def start(self) -> str:
        """Start the engine."""


class Wheels(ABC):
    family: str = ""

    @abstractmethod
    def roll(self) -> str:
        """Turn the wheels."""


class CarEngine(Engine):
    family = "car"

    def start(self) -> str:
        return "Car engine started."


class CarWheels(Wheels):
    family = "car"

    def roll(self) -> str:
        return "Four car wheels rolling."


class BikeEngine(Engine):
    family = "bike"

    def start(self) -> str:
        return "Bike engine started."


class BikeWheels(Wheels):
    family = "bike"

    def roll(self) -> str:
        return "Two bike wheels rolling."


class VehiclePartsFactory(AbstractFactory):
    """Creates one engine and one set of wheels of the same family."""

    @abstractmethod
    def create_engine(self) -> Engine:
        pass

    @abstractmethod
    def create_wheels(self) -> Wheels:
        pass


class CarPartsFactory(VehiclePartsFactory):
    family = "car"

    def create_engine(self) -> Engine:
        return CarEngine()

    def create_wheels(self) -> Wheels:
        return CarWheels()


class BikePartsFactory(VehiclePartsFactory):
    family = "bike"

    def create_engine(self) -> Engine:
        return BikeEngine()

    def create_wheels(self) -> Wheels:
        return BikeWheels()
