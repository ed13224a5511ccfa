"""
Session Gateway Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Business error codes surfaced to API callers"""

    MISSING_INFORMATION = "MISSING_INFORMATION"
    EMAIL_NOT_FOUND = "EMAIL_NOT_FOUND"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    SESSION_EXPIRED = "SESSION_EXPIRED"
    SESSION_INVALID = "SESSION_INVALID"
    DATABASE_ERROR = "DATABASE_ERROR"


class SessionVerificationReason(str, Enum):
    """Why a session failed verification"""

    INVALID = "INVALID"
    EXPIRED = "EXPIRED"


ERROR_CODE_MESSAGES = {
    ErrorCode.MISSING_INFORMATION: "Email and password are required",
    ErrorCode.EMAIL_NOT_FOUND: "Email address not found in the system",
    ErrorCode.INCORRECT_PASSWORD: "Password is incorrect",
    ErrorCode.EMAIL_ALREADY_EXISTS: "Email already registered",
    ErrorCode.SESSION_EXPIRED: "Session token has expired",
    ErrorCode.SESSION_INVALID: "Session token is invalid or does not exist",
    ErrorCode.DATABASE_ERROR: "Database error occurred",
}
