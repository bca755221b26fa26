"""Error Hierarchy — status codes, categories and the REST envelope.

Tests:
    - Each error family maps to its HTTP status
    - to_response() carries code, message, category, severity, registration
    - DatabaseError never exposes its internal message to clients
"""

import pytest

from fleet.core.errors import (
    CarAlreadyRegisteredError, CarAlreadyRentedError, CarNotRentedError,
    ConflictError, DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    FleetError, InvalidInputError, InvalidMileageError, InvalidTransitionError,
    ResourceNotFoundError,
)


@pytest.mark.parametrize("error,status,category", [
    (InvalidInputError("bad", "model"), 400, ErrorCategory.VALIDATION),
    (InvalidMileageError("x"), 400, ErrorCategory.VALIDATION),
    (CarAlreadyRentedError(), 400, ErrorCategory.BUSINESS_RULE),
    (CarNotRentedError(), 400, ErrorCategory.BUSINESS_RULE),
    (ResourceNotFoundError("Car", "BTS812"), 404, ErrorCategory.RESOURCE_NOT_FOUND),
    (CarAlreadyRegisteredError(), 409, ErrorCategory.CONFLICT),
    (DatabaseError("boom", "query"), 500, ErrorCategory.DATABASE),
])
def test_error_status_and_category(error, status, category):
    assert isinstance(error, FleetError)
    assert error.http_status == status
    assert error.category is category


def test_transition_errors_share_a_base():
    assert issubclass(CarAlreadyRentedError, InvalidTransitionError)
    assert issubclass(CarNotRentedError, InvalidTransitionError)
    assert issubclass(CarAlreadyRegisteredError, ConflictError)


def test_to_response_envelope():
    err = CarAlreadyRentedError(ErrorContext(registration="BTS812"))
    body = err.to_response()["error"]
    assert body["code"] == "CAR_ALREADY_RENTED"
    assert body["message"] == "Car is already rented"
    assert body["category"] == "business_rule"
    assert body["severity"] == ErrorSeverity.WARNING.value
    assert body["context"] == {"registration": "BTS812"}
    assert "timestamp" in body


def test_not_found_message_does_not_echo_identifier():
    err = ResourceNotFoundError("Car", "<script>")
    assert err.to_response()["error"]["message"] == "Car not found"
    assert err.resource_id == "<script>"


def test_database_error_hides_internal_detail():
    err = DatabaseError("UNIQUE constraint failed: cars.registration", "commit")
    body = err.to_response()["error"]
    assert "UNIQUE" not in body["message"]
    assert "UNIQUE" in err.message
    assert body["severity"] == "critical"
