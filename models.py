from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from exceptions import InvalidArgumentError


class VehicleKind(Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"


@dataclass(frozen=True)
class Vehicle:
    """
    Anything that can be parked.

    The garage only relies on ``identifier``; any object exposing a string
    ``identifier`` attribute is accepted, not just subclasses of this one.
    """
    identifier: str
    kind: ClassVar[Optional[VehicleKind]] = None

    def __str__(self) -> str:
        return f"{type(self).__name__}{{identifier='{self.identifier}'}}"


class Car(Vehicle):
    kind = VehicleKind.CAR


class Motorbike(Vehicle):
    kind = VehicleKind.MOTORBIKE


# -------------------------
# Vehicle factory
# -------------------------
def create_car(identifier: str) -> Car:
    return Car(identifier)


def create_motorbike(identifier: str) -> Motorbike:
    return Motorbike(identifier)


_FACTORIES = {
    VehicleKind.CAR: create_car,
    VehicleKind.MOTORBIKE: create_motorbike,
}


def create_vehicle(kind: str | VehicleKind, identifier: str) -> Vehicle:
    """Build a vehicle from a kind name such as ``"car"`` or ``"motorbike"``."""
    if not isinstance(kind, VehicleKind):
        if not isinstance(kind, str):
            raise InvalidArgumentError(f"Vehicle kind must be a string, got {kind!r}")
        try:
            kind = VehicleKind(kind.strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown vehicle kind: {kind!r}") from None
    return _FACTORIES[kind](identifier)


# -------------------------
# Locations
# -------------------------
@dataclass(frozen=True)
class Location:
    level: int
    lot: int

    def __post_init__(self) -> None:
        if self.level < 0 or self.lot < 0:
            raise InvalidArgumentError(
                f"Location must be non-negative, got level={self.level} lot={self.lot}"
            )

    def __str__(self) -> str:
        return f"level {self.level}, lot {self.lot}"

    def to_dict(self) -> dict[str, int]:
        return {"level": self.level, "lot": self.lot}


@dataclass(frozen=True)
class VehicleLocation:
    vehicle: Any
    location: Location

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"identifier": self.vehicle.identifier}
        kind = getattr(self.vehicle, "kind", None)
        if isinstance(kind, VehicleKind):
            data["kind"] = kind.value
        data.update(self.location.to_dict())
        return data


@dataclass(frozen=True)
class LotRecord:
    position: int
    occupant: Any       # any object with an ``identifier`` string

    @property
    def identifier(self) -> str:
        return self.occupant.identifier
