"""Exception hierarchy for the garage engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from models import Location


class GarageError(Exception):
    """Base exception for all garage errors."""


class GarageConfigError(GarageError):
    """Invalid configuration value."""


class InvalidArgumentError(GarageError, ValueError):
    """Invalid construction parameter or caller error."""


class DuplicateVehicleError(InvalidArgumentError):
    """The vehicle is already parked somewhere in the garage."""

    def __init__(
        self,
        message: str,
        *,
        identifier: str = "",
        location: Optional[Location] = None,
    ) -> None:
        self.identifier = identifier
        self.location = location
        super().__init__(message)


class MissingIdentifierError(GarageError, ValueError):
    """Vehicle argument is absent or has no usable identifier."""
