"""Motorcycle vehicle category."""

from .vehicle import Vehicle


class Motorcycle(Vehicle):
    """Motorcycle. A helmet fee is added to each rental day."""

    LABEL = "Motorcycle"
    TYPE = "motorcycle"
    SURCHARGE = 5.0  # helmet fee

    def calculate_rental_cost(self, days: int) -> float:
        return (self.base_rental_rate + self.SURCHARGE) * days
