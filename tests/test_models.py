from __future__ import annotations

import pytest

from exceptions import InvalidArgumentError
from models import (
    Car,
    Location,
    Motorbike,
    Vehicle,
    VehicleKind,
    VehicleLocation,
    create_car,
    create_motorbike,
    create_vehicle,
)


def test_factories_build_expected_kinds() -> None:
    assert isinstance(create_car("c"), Car)
    assert isinstance(create_motorbike("m"), Motorbike)
    assert create_motorbike("m").kind is VehicleKind.MOTORBIKE


@pytest.mark.parametrize(
    ("kind", "expected"),
    [("car", Car), (" Motorbike ", Motorbike), (VehicleKind.CAR, Car)],
)
def test_create_vehicle_by_kind(kind, expected) -> None:
    vehicle = create_vehicle(kind, "id-1")

    assert type(vehicle) is expected
    assert vehicle.identifier == "id-1"


def test_create_vehicle_unknown_kind() -> None:
    with pytest.raises(InvalidArgumentError):
        create_vehicle("truck", "t1")


def test_vehicle_str() -> None:
    assert str(create_car("car1")) == "Car{identifier='car1'}"


def test_location_rejects_negative_values() -> None:
    with pytest.raises(InvalidArgumentError):
        Location(-1, 0)
    with pytest.raises(InvalidArgumentError):
        Location(0, -1)


def test_vehicle_location_to_dict() -> None:
    vl = VehicleLocation(create_motorbike("m1"), Location(1, 2))

    assert vl.to_dict() == {"identifier": "m1", "kind": "motorbike", "level": 1, "lot": 2}


def test_plain_vehicle_has_no_kind() -> None:
    vehicle = Vehicle("v1")

    assert vehicle.kind is None
    assert VehicleLocation(vehicle, Location(0, 0)).to_dict() == {"identifier": "v1", "level": 0, "lot": 0}


def test_create_vehicle_non_string_kind() -> None:
    with pytest.raises(InvalidArgumentError):
        create_vehicle(3, "a")
