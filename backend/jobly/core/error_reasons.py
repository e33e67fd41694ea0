"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; clients may match on them.
"""

from enum import Enum


class ErrorReason(str, Enum):
    INVALID_INPUT = "Invalid input"
    RESOURCE_NOT_FOUND = "Resource not found"
    ALREADY_EXISTS = "Resource already exists"

    DATABASE_UNAVAILABLE = "Database unavailable"
    INTERNAL_ERROR = "Internal server error"
    AUTH_REQUIRED = "Authentication required"
    AUTH_INVALID = "Invalid authentication"
    AUTH_FORBIDDEN = "Authentication forbidden"
