"""
Session Gateway Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ERROR_CODE_MESSAGES,
    ErrorCode,
    SessionVerificationReason,
)

# Export all entities
from .user import User
from .api_key import ApiKey
from .session import SessionMetadataRecord, SessionRecord

__all__ = [
    # Enums
    "ErrorCode",
    "SessionVerificationReason",
    "ERROR_CODE_MESSAGES",
    # Entities
    "User",
    "ApiKey",
    "SessionRecord",
    "SessionMetadataRecord",
]
