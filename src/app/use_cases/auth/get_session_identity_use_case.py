import logging
from typing import Optional

from pydantic import ValidationError

from src.app.services.session_store import SessionStore
from src.app.services.tokens import is_valid_session_token, token_prefix
from src.domain.entities import SessionRecord
from .dtos import SessionIdentity

logger = logging.getLogger(__name__)


class GetSessionIdentityUseCase:
    """Read the identity behind a live session from the primary record only"""

    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    async def execute(self, session_token: str) -> Optional[SessionIdentity]:
        if not session_token or not is_valid_session_token(session_token):
            return None

        try:
            payload = await self.session_store.get_session(session_token)
            if payload is None:
                return None
            record = SessionRecord.model_validate(payload)
        except (ValueError, ValidationError):
            logger.warning(f"Unreadable session record for {token_prefix(session_token)}")
            return None
        except Exception:
            logger.exception(f"Get user from session error for {token_prefix(session_token)}")
            return None

        return SessionIdentity(email=record.email, timestamp=record.timestamp)
