"""Car vehicle category."""

from .vehicle import Vehicle


class Car(Vehicle):
    """Passenger car. Every rental day includes insurance."""

    LABEL = "Car"
    TYPE = "car"
    SURCHARGE = 20.0  # insurance

    def calculate_rental_cost(self, days: int) -> float:
        return (self.base_rental_rate + self.SURCHARGE) * days
