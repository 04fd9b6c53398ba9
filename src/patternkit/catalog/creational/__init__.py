"""Creational patterns: Factory, Simple Factory, Factory Method, Abstract Factory, Singleton."""

from .abstract_factory import (
    BikeEngine,
    BikePartsFactory,
    BikeWheels,
    CarEngine,
    CarPartsFactory,
    CarWheels,
    Engine,
    VehiclePartsFactory,
    Wheels,
)
from .factory import Bicycle, Car, Truck, Vehicle, VehicleFactory, VehicleType, create_vehicle
from .factory_method import BicycleCreator, CarCreator, TruckCreator, VehicleCreator
from .singleton import AppSingleton

__all__ = [
    "Vehicle",
    "Car",
    "Bicycle",
    "Truck",
    "VehicleType",
    "VehicleFactory",
    "create_vehicle",
    "VehicleCreator",
    "CarCreator",
    "BicycleCreator",
    "TruckCreator",
    "Engine",
    "Wheels",
    "CarEngine",
    "CarWheels",
    "BikeEngine",
    "BikeWheels",
    "VehiclePartsFactory",
    "CarPartsFactory",
    "BikePartsFactory",
    "AppSingleton",
]
