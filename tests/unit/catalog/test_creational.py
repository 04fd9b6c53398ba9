"""Tests for the creational pattern catalog."""

import pytest

from patternkit.catalog.creational import (
    AppSingleton,
    Bicycle,
    BicycleCreator,
    BikePartsFactory,
    Car,
    CarCreator,
    CarPartsFactory,
    Truck,
    TruckCreator,
    VehicleFactory,
    VehicleType,
    create_vehicle,
)
from patternkit.domain.core.exceptions import (
    ConstructionNotAllowedError,
    UnsupportedVariantError,
)


class TestVehicleFactory:
    """Test cases for the Factory and Simple Factory demonstrations."""

    @pytest.mark.parametrize(
        "selector, vehicle_class, output",
        [
            ("car", Car, "Driving a car..."),
            ("bike", Bicycle, "Riding a bicycle..."),
            ("truck", Truck, "Driving a truck..."),
            (VehicleType.CAR, Car, "Driving a car..."),
        ],
    )
    def test_create_vehicle(self, selector, vehicle_class, output):
        vehicle = VehicleFactory().create_vehicle(selector)

        assert isinstance(vehicle, vehicle_class)
        assert vehicle.drive() == output

    def test_unknown_vehicle(self):
        with pytest.raises(UnsupportedVariantError) as exc_info:
            create_vehicle("spaceship")

        assert exc_info.value.selector == "spaceship"
        assert set(exc_info.value.supported) == {"car", "bike", "truck"}

    def test_simple_factory_function(self):
        assert create_vehicle("car").kind == "car"


class TestVehicleCreators:
    """Test cases for the Factory Method demonstration."""

    def test_each_creator_drives_its_own_vehicle(self):
        assert CarCreator().start_driving() == "Driving a car..."
        assert BicycleCreator().start_driving() == "Riding a bicycle..."
        assert TruckCreator().start_driving() == "Driving a truck..."

    def test_creator_returns_new_products(self):
        creator = CarCreator()

        assert creator.create() is not creator.create()


class TestVehiclePartsFactories:
    """Test cases for the Abstract Factory demonstration."""

    @pytest.mark.parametrize("factory_class", [CarPartsFactory, BikePartsFactory])
    def test_parts_belong_to_factory_family(self, factory_class):
        factory = factory_class()

        engine = factory.create_engine()
        wheels = factory.create_wheels()

        assert engine.family == wheels.family == factory.family

    def test_families_differ(self):
        assert CarPartsFactory().create_engine().start() == "Car engine started."
        assert BikePartsFactory().create_wheels().roll() == "Two bike wheels rolling."
        assert CarPartsFactory.family != BikePartsFactory.family


class TestAppSingleton:
    """Test cases for the Singleton demonstration."""

    def test_accessor_returns_one_instance(self):
        first = AppSingleton.get_instance()

        assert AppSingleton.get_instance() is first
        assert first.do_something() == "Doing something..."

    def test_direct_construction_rejected(self):
        with pytest.raises(ConstructionNotAllowedError):
            AppSingleton()
