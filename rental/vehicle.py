"""Vehicle base class - identity, pricing and availability shared by every category."""

import numbers
from abc import ABC, abstractmethod
from typing import Callable, Optional, Protocol

from .customer import Customer
from .errors import InvalidStateError, ValidationError
from .status import VehicleStatus

Notify = Callable[[str], None]


def _check_rate(rate: float) -> float:
    # bool is an int subclass
    if isinstance(rate, bool) or not isinstance(rate, numbers.Real):
        raise ValidationError(f"Base rental rate must be a number, got {rate!r}.")
    rate = float(rate)
    if not rate >= 0:
        raise ValidationError("Base rental rate must be non-negative.")
    return rate


class Rentable(Protocol):
    """What the agency needs from a fleet entry."""

    available: bool

    @property
    def vehicle_id(self) -> str: ...

    @property
    def model(self) -> str: ...

    def calculate_rental_cost(self, days: int) -> float: ...

    def is_available_for_rental(self) -> bool: ...

    def rent(self, customer: Customer, days: int, notify: Optional[Notify] = None) -> None: ...

    def return_vehicle(self, notify: Optional[Notify] = None) -> None: ...


class Vehicle(ABC):
    """
    A rentable vehicle.

    Subclasses set LABEL (used in notifications), TYPE (the key used in
    fleet files) and SURCHARGE (flat amount added to the daily rate), and
    implement calculate_rental_cost.
    """

    LABEL = "Vehicle"
    TYPE = ""
    SURCHARGE = 0.0

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        base_rental_rate: float,
        notify: Optional[Notify] = None,
    ):
        self._vehicle_id = vehicle_id
        self._model = model
        self._base_rental_rate = _check_rate(base_rental_rate)
        self.available = True
        self.notify = notify or print

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.vehicle_id!r}, {self.model!r}, "
            f"{self.base_rental_rate!r})"
        )

    @property
    def vehicle_id(self) -> str:
        return self._vehicle_id

    @property
    def model(self) -> str:
        return self._model

    @property
    def base_rental_rate(self) -> float:
        """Daily rate before the category surcharge."""
        return self._base_rental_rate

    @base_rental_rate.setter
    def base_rental_rate(self, rate: float) -> None:
        self._base_rental_rate = _check_rate(rate)

    @property
    def status(self) -> VehicleStatus:
        return VehicleStatus.AVAILABLE if self.available else VehicleStatus.RENTED

    @abstractmethod
    def calculate_rental_cost(self, days: int) -> float:
        """Total cost of renting for the given number of days."""

    def is_available_for_rental(self) -> bool:
        return self.available

    def rent(self, customer: Customer, days: int, notify: Optional[Notify] = None) -> None:
        """
        Mark the vehicle as rented to a customer.

        Raises InvalidStateError if the vehicle is already rented. The day
        count is reported as given; it is not checked.
        """
        if not self.is_available_for_rental():
            raise InvalidStateError(f"{self.LABEL} is not available for rental.")
        self.available = False
        (notify or self.notify)(f"{self.LABEL} rented to {customer.name} for {days} days.")

    def return_vehicle(self, notify: Optional[Notify] = None) -> None:
        """Mark the vehicle as available again. Always succeeds."""
        self.available = True
        (notify or self.notify)(f"{self.LABEL} returned.")
