"""YAML loading and schema validation for fleet files."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

import yaml
from jsonschema import Draft7Validator

from .agency import RentalAgency
from .car import Car
from .errors import FleetFileError, ValidationError
from .motorcycle import Motorcycle
from .truck import Truck
from .vehicle import Notify, Vehicle

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"

VEHICLE_TYPES: Dict[str, Type[Vehicle]] = {
    cls.TYPE: cls for cls in (Car, Motorcycle, Truck)
}


@lru_cache(maxsize=None)
def load_schema() -> dict:
    """Load the fleet JSON schema from schema.yaml. Callers must not modify it."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def _format_error(error) -> str:
    message = f"Schema validation error: {error.message}"
    if error.path:
        message += f" (at {'.'.join(str(p) for p in error.path)})"
    return message


def fleet_errors(data: Any) -> List[str]:
    """Every schema violation in loaded fleet data, not just the first."""
    validator = Draft7Validator(load_schema())
    return [_format_error(e) for e in validator.iter_errors(data)]


def entry_errors(dct: Any) -> List[str]:
    """Schema violations in a single fleet entry."""
    validator = Draft7Validator(load_schema()["properties"]["vehicles"]["items"])
    return [_format_error(e) for e in validator.iter_errors(dct)]


def read_fleet(filename: Union[str, Path]) -> Any:
    """Parse a fleet YAML file without validating it."""
    with open(filename, "r") as fp:
        return yaml.safe_load(fp)


def vehicle_from_dict(dct: Dict[str, Any], notify: Optional[Notify] = None) -> Vehicle:
    """Build a vehicle from a fleet file entry. Raises ValidationError on a bad entry."""
    errors = entry_errors(dct)
    if errors:
        raise ValidationError("Invalid vehicle entry: " + "; ".join(errors))
    cls = VEHICLE_TYPES[dct["type"]]
    vehicle = cls(dct["id"], dct["model"], dct["rate"], notify)
    vehicle.available = dct.get("available", True)
    return vehicle


def load_agency(filename: Union[str, Path], notify: Optional[Notify] = None) -> RentalAgency:
    """
    Load a fleet YAML file into a new agency.

    Raises FleetFileError listing every schema violation if the file does
    not describe a valid fleet; nothing is built in that case.
    """
    data = read_fleet(filename)
    errors = fleet_errors(data)
    if errors:
        raise FleetFileError(filename, errors)

    agency = RentalAgency(notify)
    for entry in data["vehicles"]:
        agency.add_vehicle(vehicle_from_dict(entry, notify))
    logger.info("Loaded %d vehicles from %s", len(agency), filename)
    return agency
