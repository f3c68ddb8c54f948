#!/usr/bin/env python3
"""
CLI for a vehicle rental fleet.

The fleet is loaded from a YAML file and held in memory; rent and return
show their effect on the fleet but nothing is written back to the file.

Commands:
  list       - Show every vehicle and its status
  available  - List the models available for rental
  quote      - Show the rental cost of a vehicle
  rent       - Rent a vehicle to a customer
  return     - Return a rented vehicle
"""

import argparse
import sys
from pathlib import Path
from tabulate import tabulate
from typing import Iterable, List

import yaml

from rental import Customer, FleetFileError, RentalAgency, ValidationError, load_agency
from rental.logging_config import configure_logging

# =============================================================================
# Formatting helpers
# =============================================================================


def format_rate(rate: float) -> str:
    """Format a daily rate or cost for display."""
    return f"${rate:,.2f}"


def make_fleet_table(vehicles: Iterable) -> List[List[str]]:
    """Convert fleet vehicles to table rows."""
    rows = []
    for vehicle in vehicles:
        rows.append(
            [
                vehicle.vehicle_id,
                vehicle.LABEL,
                vehicle.model,
                format_rate(vehicle.base_rental_rate),
                format_rate(vehicle.SURCHARGE),
                vehicle.status.value,
            ]
        )
    return rows


def print_fleet(agency: RentalAgency) -> None:
    headers = ["ID", "Type", "Model", "Rate/day", "Surcharge/day", "Status"]
    print(tabulate(make_fleet_table(agency.fleet), headers=headers, tablefmt="simple"))


# =============================================================================
# Commands
# =============================================================================


def cmd_list(agency: RentalAgency, args) -> int:
    """Show every vehicle and its status."""
    print(f"Vehicles: {len(agency)}")
    print(f"Available: {len(agency.available_vehicles())}")
    print()
    if len(agency) == 0:
        print("No vehicles found.")
        return 0
    print_fleet(agency)
    return 0


def cmd_available(agency: RentalAgency, args) -> int:
    """List the models available for rental."""
    agency.list_available_vehicles()
    return 0


def cmd_quote(agency: RentalAgency, args) -> int:
    """Show the rental cost of a vehicle."""
    vehicle = agency.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle id '{args.vehicle_id}'")
        return 1

    cost = agency.quote(args.vehicle_id, args.days)
    print(f"Vehicle:   {vehicle.model} ({vehicle.LABEL})")
    print(f"Rate:      {format_rate(vehicle.base_rental_rate)} + {format_rate(vehicle.SURCHARGE)} per day")
    print(f"Days:      {args.days}")
    print(f"Total:     {format_rate(cost)}")
    if not vehicle.available:
        print("(currently rented)")
    return 0


def cmd_rent(agency: RentalAgency, args) -> int:
    """Rent a vehicle to a customer."""
    customer = Customer(args.customer, args.license)
    if not agency.rent_vehicle(args.vehicle_id, customer, args.days):
        return 1
    print()
    print_fleet(agency)
    print()
    print("(not saved - fleet file unchanged)")
    return 0


def cmd_return(agency: RentalAgency, args) -> int:
    """Return a rented vehicle."""
    if not agency.return_vehicle(args.vehicle_id):
        return 1
    print()
    print_fleet(agency)
    print()
    print("(not saved - fleet file unchanged)")
    return 0


COMMANDS = {
    "list": cmd_list,
    "available": cmd_available,
    "quote": cmd_quote,
    "rent": cmd_rent,
    "return": cmd_return,
}


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle rental fleet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/demo.yaml list
  %(prog)s fleets/demo.yaml available
  %(prog)s fleets/demo.yaml quote C1 --days 3
  %(prog)s fleets/demo.yaml rent C1 --customer Alice --license L1 --days 3
  %(prog)s fleets/demo.yaml return C2
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show every vehicle and its status")
    subparsers.add_parser("available", help="List the models available for rental")

    quote_parser = subparsers.add_parser("quote", help="Show the rental cost of a vehicle")
    quote_parser.add_argument("vehicle_id", type=str, help="Vehicle id (e.g., 'C1')")
    quote_parser.add_argument(
        "--days",
        type=int,
        required=True,
        help="Number of rental days",
    )

    rent_parser = subparsers.add_parser("rent", help="Rent a vehicle to a customer")
    rent_parser.add_argument("vehicle_id", type=str, help="Vehicle id (e.g., 'C1')")
    rent_parser.add_argument(
        "--customer",
        type=str,
        required=True,
        help="Customer name",
    )
    rent_parser.add_argument(
        "--license",
        type=str,
        default="",
        help="Customer license number",
    )
    rent_parser.add_argument(
        "--days",
        type=int,
        required=True,
        help="Number of rental days",
    )

    return_parser = subparsers.add_parser("return", help="Return a rented vehicle")
    return_parser.add_argument("vehicle_id", type=str, help="Vehicle id (e.g., 'C1')")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    try:
        agency = load_agency(args.fleet_file)
    except FleetFileError as e:
        print(f"Error: Invalid fleet file: {e.filename}")
        for error in e.errors:
            print(f"  {error}")
        return 1
    except (ValidationError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    return COMMANDS[args.command](agency, args)


if __name__ == "__main__":
    sys.exit(main() or 0)
