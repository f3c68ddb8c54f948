"""RentalAgency - owns the fleet and dispatches rent/return by vehicle id."""

import logging
from typing import List, Optional, Tuple

from .customer import Customer
from .vehicle import Notify, Rentable

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "Vehicle not available for rental."
NOT_FOUND_OR_AVAILABLE = "Vehicle not found or already available."


class RentalAgency:
    """
    A fleet of vehicles, kept in the order they were added.

    Lookups scan the fleet in that order and stop at the first match, so a
    duplicated id resolves to the earliest matching vehicle. A lookup that
    finds nothing is reported through the notification sink rather than
    raised.
    """

    def __init__(self, notify: Optional[Notify] = None):
        self._fleet: List[Rentable] = []
        self.notify = notify or print

    def __len__(self) -> int:
        return len(self._fleet)

    @property
    def fleet(self) -> Tuple[Rentable, ...]:
        """Snapshot of the fleet in insertion order."""
        return tuple(self._fleet)

    def add_vehicle(self, vehicle: Rentable) -> None:
        self._fleet.append(vehicle)
        logger.debug("Added %s %s (%s)", type(vehicle).__name__, vehicle.vehicle_id, vehicle.model)

    def get_vehicle(self, vehicle_id: str) -> Optional[Rentable]:
        """Find the first vehicle with the given id."""
        for vehicle in self._fleet:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        return None

    def available_vehicles(self) -> List[Rentable]:
        return [v for v in self._fleet if v.available]

    def list_available_vehicles(self) -> List[str]:
        """Report the model of every available vehicle, in fleet order."""
        self.notify("Available Vehicles:")
        models = [v.model for v in self.available_vehicles()]
        for model in models:
            self.notify(model)
        return models

    def quote(self, vehicle_id: str, days: int) -> Optional[float]:
        """Rental cost for a vehicle, or None if the id is unknown."""
        vehicle = self.get_vehicle(vehicle_id)
        if vehicle is None:
            return None
        return vehicle.calculate_rental_cost(days)

    def rent_vehicle(self, vehicle_id: str, customer: Customer, days: int) -> bool:
        """
        Rent the first available vehicle with the given id.

        Returns False (after notifying) when the id is unknown or every
        vehicle with that id is already rented.
        """
        for vehicle in self._fleet:
            if vehicle.vehicle_id == vehicle_id and vehicle.available:
                vehicle.rent(customer, days, notify=self.notify)
                logger.info("Rented %s to %s for %s days", vehicle_id, customer.name, days)
                return True
        logger.info("Rent of %s refused: no available vehicle with that id", vehicle_id)
        self.notify(NOT_AVAILABLE)
        return False

    def return_vehicle(self, vehicle_id: str) -> bool:
        """
        Return the first rented vehicle with the given id.

        Returns False (after notifying) when the id is unknown or no vehicle
        with that id is currently rented.
        """
        for vehicle in self._fleet:
            if vehicle.vehicle_id == vehicle_id and not vehicle.available:
                vehicle.return_vehicle(notify=self.notify)
                logger.info("Returned %s", vehicle_id)
                return True
        logger.info("Return of %s refused: no rented vehicle with that id", vehicle_id)
        self.notify(NOT_FOUND_OR_AVAILABLE)
        return False
