"""Status enum for vehicle availability."""

from enum import Enum


class VehicleStatus(Enum):
    """Availability states of a fleet vehicle."""

    AVAILABLE = "available"
    RENTED = "rented"
