import re
from typing import Any, Dict, Optional
from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError, OperationalError
from app.schemas.base import create_success_response, create_error_response
from app.core.logging_config import get_logger

logger = get_logger(__name__)


class ResponseWrapper:
    """Builds the {success, message, data, timestamp} envelope used by every route"""

    @staticmethod
    def success(data: Any = None, message: str = "Success") -> Dict[str, Any]:
        return create_success_response(jsonable_encoder(data), message)

    @staticmethod
    def created(data: Any = None, message: str = "Resource created successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def updated(data: Any = None, message: str = "Resource updated successfully") -> Dict[str, Any]:
        return ResponseWrapper.success(data, message)

    @staticmethod
    def deleted(message: str = "Resource deleted successfully") -> Dict[str, Any]:
        return create_success_response(None, message)

    @staticmethod
    def error(
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        return jsonable_encoder(create_error_response(message, error_code, details))


def _conflicting_fields(error_msg: str) -> Dict[str, str]:
    # PostgreSQL: Key (col_a, col_b)=(val_a, val_b)
    match = re.search(r"Key \((.*?)\)=\((.*?)\)", error_msg)
    if match:
        return dict(zip(match.group(1).split(", "), match.group(2).split(", ")))
    # SQLite: UNIQUE constraint failed: table.col_a, table.col_b
    match = re.search(r"UNIQUE constraint failed: ([\w., ]+)", error_msg)
    if match:
        return {col.strip().split(".")[-1]: "" for col in match.group(1).split(",")}
    return {}


def _db_exception(status_code: int, message: str, error_code: str, error_msg: str, with_fields: bool = False) -> HTTPException:
    details: Dict[str, Any] = {"db_error": error_msg}
    if with_fields:
        details["conflicting_fields"] = _conflicting_fields(error_msg)
    return HTTPException(status_code=status_code, detail=ResponseWrapper.error(message, error_code, details))


def handle_db_error(error: Exception) -> HTTPException:
    """
    Map a SQLAlchemy error onto an HTTPException.

    Integrity errors are split by the driver message (PostgreSQL and SQLite
    spell them differently): unique -> 409, foreign key -> 404,
    not null -> 400. A lost connection is 503, anything else 500.
    """
    error_msg = str(getattr(error, "orig", None) or error).strip().replace("\n", " ")
    lowered = error_msg.lower()

    if isinstance(error, IntegrityError):
        if "duplicate key" in lowered or "unique constraint" in lowered:
            return _db_exception(
                status.HTTP_409_CONFLICT, "Resource already exists with the same values",
                "DUPLICATE_RESOURCE", error_msg, with_fields=True,
            )
        if "foreign key" in lowered:
            return _db_exception(
                status.HTTP_404_NOT_FOUND, "Referenced resource not found",
                "FOREIGN_KEY_VIOLATION", error_msg, with_fields=True,
            )
        if "not null" in lowered or "not-null" in lowered:
            return _db_exception(
                status.HTTP_400_BAD_REQUEST, "A required value is missing", "MISSING_REQUIRED_VALUE", error_msg,
            )

    if isinstance(error, OperationalError):
        logger.error(f"[DB] Database unavailable: {error_msg}")
        return _db_exception(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Database is unavailable", "DATABASE_UNAVAILABLE", error_msg,
        )

    return _db_exception(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Database operation failed", "DATABASE_ERROR", error_msg,
    )


def handle_http_error(error: Exception) -> HTTPException:
    """Pass structured HTTPExceptions through; wrap anything else in the error envelope"""
    if isinstance(error, HTTPException):
        detail = error.detail
        if isinstance(detail, dict) and detail.get("success") is not None:
            return error
        return HTTPException(
            status_code=error.status_code,
            detail=ResponseWrapper.error(str(detail), "HTTP_ERROR", {"original_error": detail}),
        )

    logger.exception(f"Unexpected error: {error}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=ResponseWrapper.error("Unexpected server error", "INTERNAL_SERVER_ERROR", {"original_error": str(error)}),
    )
