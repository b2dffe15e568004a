from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from exceptions import DuplicateVehicleError, InvalidArgumentError, MissingIdentifierError
from models import Location, VehicleLocation
from parking_level import ParkingLevel, vehicle_identifier

if TYPE_CHECKING:
    from config import GarageConfig

_logger = logging.getLogger(__name__)


class Garage:
    """
    Multi-level parking garage

    - Levels are created once and never resized
    - enter: first level with a free lot, lowest free lot on that level
    - exit / find_location: first level holding the vehicle
    - A vehicle identifier is parked at most once across all levels

    Not thread-safe: enter checks uniqueness, picks a level and mutates it
    in three separate steps.
    """

    def __init__(self, number_of_levels: int, lots_per_level: int) -> None:
        if number_of_levels <= 0:
            raise InvalidArgumentError(
                f"The number of levels must be greater than 0, got {number_of_levels}."
            )
        if lots_per_level < 0:
            raise InvalidArgumentError(
                f"The number of lots must be greater or equal than 0, got {lots_per_level}."
            )
        self._levels: tuple[ParkingLevel, ...] = tuple(
            ParkingLevel(i, lots_per_level) for i in range(number_of_levels)
        )

    @classmethod
    def from_config(cls, config: GarageConfig) -> Garage:
        return cls(config.levels, config.lots_per_level)

    @property
    def levels(self) -> tuple[ParkingLevel, ...]:
        return self._levels

    # -------------------------
    # Counts
    # -------------------------
    def number_of_levels(self) -> int:
        return len(self._levels)

    def total_lots(self) -> int:
        return sum(level.total_lots() for level in self._levels)

    def free_lots(self) -> int:
        return sum(level.free_lots() for level in self._levels)

    def occupied_lots(self) -> int:
        return sum(level.occupied_lots() for level in self._levels)

    def has_vehicle(self, vehicle_or_id: Any) -> bool:
        return self.find_location(vehicle_or_id) is not None

    # -------------------------
    # Enter / exit
    # -------------------------
    def enter(self, vehicle: Any) -> Optional[Location]:
        """
        Park the vehicle, returning its location or None when the garage is full.

        Raises DuplicateVehicleError if the vehicle is already parked.
        """
        if isinstance(vehicle, str):
            raise MissingIdentifierError("A vehicle is required, not a bare identifier.")
        identifier = vehicle_identifier(vehicle)

        existing = self.find_location(identifier)
        if existing is not None:
            _logger.info("Rejected %s: already parked at %s", identifier, existing)
            raise DuplicateVehicleError(
                f"Vehicle {identifier!r} is already in the garage.",
                identifier=identifier,
                location=existing,
            )

        for level in self._levels:
            if level.has_free_lots():
                return level.enter(vehicle)

        _logger.info("Garage is full, %s not parked", identifier)
        return None

    def exit(self, vehicle: Any) -> Optional[Location]:
        """Release the vehicle's lot, returning its former location or None."""
        for level in self._levels:
            if level.has_vehicle(vehicle):
                return level.exit(vehicle)
        return None

    # -------------------------
    # Lookup
    # -------------------------
    def find_location(self, vehicle_or_id: Any) -> Optional[Location]:
        for level in self._levels:
            location = level.find_location(vehicle_or_id)
            if location is not None:
                return location
        return None

    def vehicle_locations(self) -> list[VehicleLocation]:
        return [vl for level in self._levels for vl in level.vehicle_locations()]

    def summary(self) -> dict[str, Any]:
        return {
            "levels": self.number_of_levels(),
            "total_lots": self.total_lots(),
            "free_lots": self.free_lots(),
            "occupied_lots": self.occupied_lots(),
            "per_level": [
                {
                    "level": level.level,
                    "total_lots": level.total_lots(),
                    "free_lots": level.free_lots(),
                    "occupied_lots": level.occupied_lots(),
                }
                for level in self._levels
            ],
        }

    def __str__(self) -> str:
        return "Garage(" + ", ".join(str(level) for level in self._levels) + ")"
