"""
errors.py
- Purpose: AppError used across services/repos for consistent errors.
- Pattern: raise AppError(...) in service/repo, handler converts to JSON response.

Taxonomy used by the companies/jobs core:
- bad_request   -> invalid input (empty update payload, min > max filter bound)
- not_found     -> lookup by key found zero rows
- conflict      -> unique key already taken
- store_failure -> the database rejected or failed a statement
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status
from jobly.core.error_codes import ErrorCode
from jobly.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.message or self.reason

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


def _reason(reason: str | ErrorReason) -> str:
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


# Convenience constructors (keeps services and repos terse)
def bad_request(
    message: str | None = None,
    *,
    reason: str | ErrorReason = ErrorReason.INVALID_INPUT,
    code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    details: dict | None = None,
) -> AppError:
    return AppError(
        code=code,
        reason=_reason(reason),
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
        message=message,
    )


def not_found(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.NOT_FOUND,
        reason=_reason(ErrorReason.RESOURCE_NOT_FOUND),
        status_code=http_status.HTTP_404_NOT_FOUND,
        details=details,
        message=message,
    )


def conflict(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.CONFLICT,
        reason=_reason(ErrorReason.ALREADY_EXISTS),
        status_code=http_status.HTTP_409_CONFLICT,
        details=details,
        message=message,
    )


def store_failure(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.DB_ERROR,
        reason=_reason(ErrorReason.DATABASE_UNAVAILABLE),
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
        message=message,
    )


def unauthorized(message: str | None = None, *, reason: str | ErrorReason = ErrorReason.AUTH_REQUIRED) -> AppError:
    return AppError(
        code=ErrorCode.UNAUTHORIZED,
        reason=_reason(reason),
        status_code=http_status.HTTP_401_UNAUTHORIZED,
        message=message,
    )


def forbidden(message: str | None = None) -> AppError:
    return AppError(
        code=ErrorCode.FORBIDDEN,
        reason=_reason(ErrorReason.AUTH_FORBIDDEN),
        status_code=http_status.HTTP_403_FORBIDDEN,
        message=message,
    )


def internal_error(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.INTERNAL_ERROR,
        reason=_reason(ErrorReason.INTERNAL_ERROR),
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
        message=message,
    )
