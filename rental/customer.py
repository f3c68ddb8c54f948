"""Customer value held by a rental."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Person renting a vehicle."""

    name: str
    license_number: str
