"""
Authentication Use Cases

All authentication-related business logic.
"""

from .login_use_case import LoginUseCase
from .signup_use_case import SignupUseCase
from .verify_session_use_case import VerifySessionUseCase
from .logout_use_case import LogoutUseCase
from .get_session_identity_use_case import GetSessionIdentityUseCase
from .session_issuer import SessionIssuer
from .dtos import (
    AuthSessionResponse,
    LoginCommand,
    LogoutResponse,
    SessionIdentity,
    SessionTokenCommand,
    SessionVerification,
    SessionVerificationResponse,
    SignupCommand,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "SignupUseCase",
    "VerifySessionUseCase",
    "LogoutUseCase",
    "GetSessionIdentityUseCase",
    "SessionIssuer",
    # DTOs - Commands
    "LoginCommand",
    "SignupCommand",
    "SessionTokenCommand",
    # DTOs - Responses
    "AuthSessionResponse",
    "SessionVerification",
    "SessionVerificationResponse",
    "LogoutResponse",
    "SessionIdentity",
]
