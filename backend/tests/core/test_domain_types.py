"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - CarStatus has exactly two states and maps to/from the rented flag
"""

from fleet.core.domain_types import CarStatus, Mileage, MileageDelta, Registration


def test_identity_and_value_types_wrap_primitives():
    assert Registration("BTS812") == "BTS812"
    assert Mileage(6003) == 6003
    assert MileageDelta(500) == 500


def test_car_status_has_two_states():
    assert set(CarStatus) == {CarStatus.AVAILABLE, CarStatus.RENTED}


def test_car_status_from_rented_flag():
    assert CarStatus.from_rented(False) is CarStatus.AVAILABLE
    assert CarStatus.from_rented(True) is CarStatus.RENTED
    assert CarStatus.RENTED.is_rented
    assert not CarStatus.AVAILABLE.is_rented


def test_car_status_values_are_strings():
    assert CarStatus.AVAILABLE.value == "available"
    assert CarStatus("rented") is CarStatus.RENTED
