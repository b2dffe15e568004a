from __future__ import annotations

import bisect
import logging
from typing import Any, Optional

from exceptions import InvalidArgumentError, MissingIdentifierError
from models import Location, LotRecord, VehicleLocation

_logger = logging.getLogger(__name__)


def vehicle_identifier(vehicle_or_id: Any) -> str:
    """
    Return the identifier of a vehicle (or of a raw identifier string).

    Raises MissingIdentifierError when the vehicle is absent or its
    identifier is missing or empty.
    """
    if vehicle_or_id is None:
        raise MissingIdentifierError("The specified vehicle must not be None.")
    if isinstance(vehicle_or_id, str):
        identifier = vehicle_or_id
    else:
        identifier = getattr(vehicle_or_id, "identifier", None)
    if not isinstance(identifier, str) or not identifier:
        raise MissingIdentifierError("The identifier of the vehicle must not be None or empty.")
    return identifier


class ParkingLevel:
    """
    One floor of the garage with a fixed number of lots.

    Occupied lots are kept as LotRecords sorted by position, so the lowest
    free position is the first gap found while walking the list.
    """

    def __init__(self, level: int, capacity: int) -> None:
        if capacity < 0:
            raise InvalidArgumentError(
                f"The number of lots must be greater or equal than 0, got {capacity}."
            )
        self._level = level
        self._capacity = capacity
        self._lots: list[LotRecord] = []

    @property
    def level(self) -> int:
        return self._level

    # -------------------------
    # Counts
    # -------------------------
    def total_lots(self) -> int:
        return self._capacity

    def occupied_lots(self) -> int:
        return len(self._lots)

    def free_lots(self) -> int:
        return self._capacity - len(self._lots)

    def has_free_lots(self) -> bool:
        return len(self._lots) < self._capacity

    def has_vehicle(self, vehicle_or_id: Any) -> bool:
        return self.find_location(vehicle_or_id) is not None

    # -------------------------
    # Allocation
    # -------------------------
    def find_free_position(self) -> Optional[int]:
        """Smallest unoccupied position, or None when the level is full."""
        candidate = 0
        for record in self._lots:
            if record.position > candidate:
                break
            candidate = record.position + 1
        if candidate < self._capacity:
            return candidate
        return None

    def enter(self, vehicle: Any) -> Optional[Location]:
        """
        Park the vehicle on the lowest free lot of this level.

        Does not check whether the vehicle is parked on another level.
        """
        if isinstance(vehicle, str):
            raise MissingIdentifierError("A vehicle is required, not a bare identifier.")
        identifier = vehicle_identifier(vehicle)

        position = self.find_free_position()
        if position is None:
            _logger.debug("Level %d is full, %s not parked", self._level, identifier)
            return None

        bisect.insort(self._lots, LotRecord(position, vehicle), key=lambda r: r.position)
        _logger.debug("Parked %s at level %d, lot %d", identifier, self._level, position)
        return Location(self._level, position)

    def exit(self, vehicle: Any) -> Optional[Location]:
        identifier = vehicle_identifier(vehicle)
        record = self._find_record(identifier)
        if record is None:
            return None

        self._lots.remove(record)
        _logger.debug("Released %s from level %d, lot %d", identifier, self._level, record.position)
        return Location(self._level, record.position)

    # -------------------------
    # Lookup
    # -------------------------
    def find_location(self, vehicle_or_id: Any) -> Optional[Location]:
        record = self._find_record(vehicle_identifier(vehicle_or_id))
        if record is None:
            return None
        return Location(self._level, record.position)

    def vehicle_locations(self) -> list[VehicleLocation]:
        return [
            VehicleLocation(record.occupant, Location(self._level, record.position))
            for record in self._lots
        ]

    def _find_record(self, identifier: str) -> Optional[LotRecord]:
        for record in self._lots:
            if record.identifier == identifier:
                return record
        return None

    def __str__(self) -> str:
        occupied = ", ".join(f"{r.identifier}@{r.position}" for r in self._lots)
        return f"ParkingLevel(level={self._level}, lots={self._capacity}, occupied=[{occupied}])"
