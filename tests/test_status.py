#!/usr/bin/env python3
"""Tests for VehicleStatus enum."""

from rental import Car, VehicleStatus


class TestVehicleStatus:
    """Tests for VehicleStatus values and derivation."""

    def test_values(self):
        assert VehicleStatus.AVAILABLE.value == "available"
        assert VehicleStatus.RENTED.value == "rented"

    def test_follows_availability_flag(self):
        car = Car("C1", "Civic", 30.0)
        assert car.status == VehicleStatus.AVAILABLE
        car.available = False
        assert car.status == VehicleStatus.RENTED
