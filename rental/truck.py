"""Truck vehicle category."""

from .vehicle import Vehicle


class Truck(Vehicle):
    """Truck. A load fee is added to each rental day."""

    LABEL = "Truck"
    TYPE = "truck"
    SURCHARGE = 50.0  # load fee

    def calculate_rental_cost(self, days: int) -> float:
        return (self.base_rental_rate + self.SURCHARGE) * days
