"""
Vehicle rental agency models.

This package provides the in-memory rental model:
- VehicleStatus: Availability states (AVAILABLE, RENTED)
- Vehicle: Base class with rate validation and rent/return behavior
- Car, Motorcycle, Truck: Vehicle categories with their own surcharge
- Customer: Who a vehicle is rented to
- RentalAgency: The fleet, with rent/return by vehicle id
"""

from .errors import ValidationError, InvalidStateError, FleetFileError
from .status import VehicleStatus
from .customer import Customer
from .vehicle import Vehicle, Rentable
from .car import Car
from .motorcycle import Motorcycle
from .truck import Truck
from .agency import RentalAgency
from .loader import load_agency, load_schema, fleet_errors, vehicle_from_dict

__all__ = [
    "ValidationError",
    "InvalidStateError",
    "FleetFileError",
    "VehicleStatus",
    "Customer",
    "Vehicle",
    "Rentable",
    "Car",
    "Motorcycle",
    "Truck",
    "RentalAgency",
    "load_agency",
    "load_schema",
    "fleet_errors",
    "vehicle_from_dict",
]
