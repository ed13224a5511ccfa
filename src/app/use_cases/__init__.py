"""
Use Cases

Organized into domain folders:
- auth/: Session authentication flows

Import from subdirectories for better organization.
"""

from .auth import (
    LoginUseCase,
    SignupUseCase,
    VerifySessionUseCase,
    LogoutUseCase,
    GetSessionIdentityUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "SignupUseCase",
    "VerifySessionUseCase",
    "LogoutUseCase",
    "GetSessionIdentityUseCase",
]
