import logging

from src.app.services.session_store import SessionStore
from src.app.services.tokens import is_valid_session_token, token_prefix
from src.domain.entities import ErrorCode
from .dtos import SessionVerification

logger = logging.getLogger(__name__)


class VerifySessionUseCase:
    """
    Classify a session token as valid, expired or invalid.

    Never raises: store failures come back as DATABASE_ERROR. Strings that
    cannot be session tokens are invalid without touching the store.
    """

    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    async def execute(self, session_token: str) -> SessionVerification:
        if not session_token or not is_valid_session_token(session_token):
            return SessionVerification(
                valid=False, expired=False, code=ErrorCode.SESSION_INVALID
            )

        try:
            status = await self.session_store.check_session_status(session_token)
        except Exception:
            logger.exception(f"Session verification error for {token_prefix(session_token)}")
            return SessionVerification(
                valid=False, expired=False, code=ErrorCode.DATABASE_ERROR
            )

        if status.valid:
            logger.debug(f"Session verified: {token_prefix(session_token)}")
            return SessionVerification(valid=True, expired=False, code=None)

        if status.expired:
            return SessionVerification(
                valid=False, expired=True, code=ErrorCode.SESSION_EXPIRED
            )

        return SessionVerification(valid=False, expired=False, code=ErrorCode.SESSION_INVALID)
