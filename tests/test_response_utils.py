import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from app.utils.response_utils import ResponseWrapper, handle_db_error, handle_http_error


def _integrity(message):
    return IntegrityError("INSERT ...", {}, Exception(message))


@pytest.mark.parametrize(
    "message, status_code, error_code",
    [
        ("UNIQUE constraint failed: vehicles.license_plate", 409, "DUPLICATE_RESOURCE"),
        ('duplicate key value violates unique constraint "vehicles_license_plate_key" '
         "DETAIL: Key (license_plate)=(KA01AB1001) already exists.", 409, "DUPLICATE_RESOURCE"),
        ("FOREIGN KEY constraint failed", 404, "FOREIGN_KEY_VIOLATION"),
        ("NOT NULL constraint failed: vehicles.make", 400, "MISSING_REQUIRED_VALUE"),
    ],
)
def test_integrity_errors_are_classified(message, status_code, error_code):
    exc = handle_db_error(_integrity(message))

    assert exc.status_code == status_code
    assert exc.detail["success"] is False
    assert exc.detail["error_code"] == error_code


def test_conflicting_fields_are_extracted():
    exc = handle_db_error(_integrity(
        'duplicate key value violates unique constraint "uq" DETAIL: Key (license_plate)=(KA01AB1001) already exists.'
    ))

    assert exc.detail["details"]["conflicting_fields"] == {"license_plate": "KA01AB1001"}


def test_sqlite_conflicting_columns_are_extracted():
    exc = handle_db_error(_integrity(
        "UNIQUE constraint failed: notifications.vehicle_id, notifications.type, notifications.message_key"
    ))

    assert set(exc.detail["details"]["conflicting_fields"]) == {"vehicle_id", "type", "message_key"}


def test_operational_error_is_unavailable():
    exc = handle_db_error(OperationalError("SELECT 1", {}, Exception("connection refused")))

    assert exc.status_code == 503
    assert exc.detail["error_code"] == "DATABASE_UNAVAILABLE"


def test_other_db_errors_are_500():
    exc = handle_db_error(SQLAlchemyError("boom"))

    assert exc.status_code == 500
    assert exc.detail["error_code"] == "DATABASE_ERROR"


def test_structured_http_exception_passes_through():
    original = HTTPException(status_code=404, detail=ResponseWrapper.error("Vehicle 1 not found", "VEHICLE_NOT_FOUND"))

    assert handle_http_error(original) is original


def test_plain_http_exception_is_wrapped():
    exc = handle_http_error(HTTPException(status_code=400, detail="bad input"))

    assert exc.status_code == 400
    assert exc.detail["error_code"] == "HTTP_ERROR"
    assert exc.detail["message"] == "bad input"


def test_unexpected_error_is_500():
    exc = handle_http_error(RuntimeError("kaboom"))

    assert exc.status_code == 500
    assert exc.detail["details"]["original_error"] == "kaboom"
