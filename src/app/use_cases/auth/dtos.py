"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Responses serialize with camelCase field names on the wire.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from src.domain.entities import ErrorCode, SessionVerificationReason


def utc_now() -> datetime:
    return datetime.now(UTC)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(CamelModel):
    """Login intent after transport decryption"""

    email: Optional[str] = None
    password: Optional[str] = None


class SignupCommand(CamelModel):
    """
    Signup intent after transport decryption

    encrypted_password arrives already decrypted by the request pipeline;
    the name matches the client-side field.
    """

    email: Optional[str] = None
    encrypted_password: Optional[str] = None


class SessionTokenCommand(CamelModel):
    """Verify and logout payload"""

    session_token: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AuthSessionResponse(CamelModel):
    """Response for login and signup, success or business failure"""

    success: bool
    session_token: Optional[str] = None
    message: str
    code: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)


class SessionVerification(BaseModel):
    """Outcome of verifying a session token"""

    valid: bool
    expired: bool
    code: Optional[ErrorCode] = None


class SessionVerificationResponse(CamelModel):
    """Response for session verification"""

    valid: bool
    message: str
    code: Optional[str] = None
    reason: Optional[SessionVerificationReason] = None
    timestamp: datetime = Field(default_factory=utc_now)

    @model_serializer(mode="wrap")
    def _omit_missing_reason(self, handler):
        # code stays even when null; reason only appears on failures
        data = handler(self)
        if self.reason is None:
            data.pop("reason", None)
        return data


class LogoutResponse(CamelModel):
    """Response for logout, always successful"""

    message: str
    timestamp: datetime = Field(default_factory=utc_now)


class SessionIdentity(CamelModel):
    """Identity read back from a live session"""

    email: str
    timestamp: datetime
