import logging
from datetime import UTC, datetime

from src.app.services.session_store import SessionStore
from src.app.services.tokens import generate_session_token

logger = logging.getLogger(__name__)


class SessionIssuer:
    """
    Session creation shared by login and signup.

    Mints a fresh 256-bit token and stores the session under it for the
    configured TTL. Store errors propagate to the calling use case.
    """

    def __init__(self, session_store: SessionStore, session_ttl_seconds: int):
        self.session_store = session_store
        self.session_ttl_seconds = session_ttl_seconds

    async def issue(self, email: str) -> str:
        token = generate_session_token()
        await self.session_store.store_session(
            token,
            {"email": email, "timestamp": datetime.now(UTC).isoformat()},
            self.session_ttl_seconds,
        )
        return token
