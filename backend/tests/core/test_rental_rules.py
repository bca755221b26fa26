"""Rental Rules — pure state transitions and mileage parsing.

Tests cover:
    - rent: AVAILABLE → RENTED, rejects RENTED
    - return: RENTED → AVAILABLE, rejects AVAILABLE before looking at mileage
    - mileage parsing: absent/empty, digits, sign handling, garbage, overflow
    - inputs are never mutated
"""

import pytest

from fleet.core.domain_types import CarStatus, Mileage, Registration
from fleet.core.errors import (
    CarAlreadyRentedError, CarNotRentedError, InvalidMileageError,
)
from fleet.core.rental_rules import (
    MAX_MILEAGE, CarRecord, parse_mileage_delta, rent, return_car,
)


def _car(rented: bool = False, mileage: int = 1000) -> CarRecord:
    return CarRecord("Tesla M3", Registration("BTS812"), Mileage(mileage), rented)


def test_new_car_is_available():
    assert _car().status is CarStatus.AVAILABLE


def test_rent_marks_car_rented():
    rented = rent(_car())
    assert rented.rented is True
    assert rented.status is CarStatus.RENTED
    assert rented.mileage == 1000


def test_rent_does_not_mutate_input():
    car = _car()
    rent(car)
    assert car.rented is False


def test_rent_rented_car_raises():
    with pytest.raises(CarAlreadyRentedError) as exc_info:
        rent(_car(rented=True))
    assert exc_info.value.http_status == 400
    assert exc_info.value.context.registration == "BTS812"


def test_return_without_mileage_keeps_mileage():
    returned = return_car(_car(rented=True))
    assert returned.rented is False
    assert returned.mileage == 1000


def test_return_adds_mileage_delta():
    returned = return_car(_car(rented=True), "500")
    assert returned.mileage == 1500


def test_return_accepts_zero_delta():
    assert return_car(_car(rented=True), "0").mileage == 1000


def test_return_available_car_raises_not_rented():
    with pytest.raises(CarNotRentedError):
        return_car(_car())


def test_return_available_car_with_bad_mileage_still_raises_not_rented():
    with pytest.raises(CarNotRentedError):
        return_car(_car(), "abc")


def test_return_rejects_overflowing_mileage():
    with pytest.raises(InvalidMileageError):
        return_car(_car(rented=True, mileage=MAX_MILEAGE), "1")


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_absent_mileage_is_none(raw):
    assert parse_mileage_delta(raw) is None


@pytest.mark.parametrize("raw,expected", [("500", 500), ("+42", 42), ("007", 7)])
def test_parse_valid_mileage(raw, expected):
    assert parse_mileage_delta(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "-5", "12.5", " 5", "1_000", "٣", "5km"])
def test_parse_invalid_mileage_raises(raw):
    with pytest.raises(InvalidMileageError) as exc_info:
        parse_mileage_delta(raw, Registration("BTS812"))
    assert exc_info.value.code == "INVALID_MILEAGE"
    assert exc_info.value.raw_value == raw
    assert exc_info.value.context.registration == "BTS812"


@pytest.mark.parametrize("raw", ["1" * 11, "9" * 5000])
def test_parse_overlong_mileage_raises(raw):
    with pytest.raises(InvalidMileageError):
        parse_mileage_delta(raw)


def test_parse_ten_digit_mileage_is_accepted():
    assert parse_mileage_delta("2147483647") == MAX_MILEAGE
