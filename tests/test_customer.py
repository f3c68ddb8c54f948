#!/usr/bin/env python3
"""Tests for Customer."""

import dataclasses

import pytest

from rental import Customer


class TestCustomer:
    """Tests for Customer value."""

    def test_attributes(self):
        customer = Customer("Alice", "L1")
        assert customer.name == "Alice"
        assert customer.license_number == "L1"

    def test_is_immutable(self):
        customer = Customer("Alice", "L1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            customer.name = "Bob"

    def test_blank_values_accepted(self):
        customer = Customer("", "")
        assert customer.name == ""
        assert customer.license_number == ""

    def test_equal_by_value(self):
        assert Customer("Alice", "L1") == Customer("Alice", "L1")
