import logging

from src.app.services.session_store import SessionStore
from src.app.services.tokens import token_prefix

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Destroy a session.

    Always succeeds from the caller's view: deleting an absent session is a
    no-op, and store failures are only logged since TTL expiry cleans up.
    """

    def __init__(self, session_store: SessionStore):
        self.session_store = session_store

    async def execute(self, session_token: str) -> None:
        if not session_token:
            return

        try:
            await self.session_store.delete_session(session_token)
            logger.info(f"User logged out: {token_prefix(session_token)}")
        except Exception:
            logger.exception(f"Logout error for {token_prefix(session_token)}")
