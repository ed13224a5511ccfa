"""
Login Use Case

Checks credentials and opens a session.
"""

import asyncio
import logging

from src.libs.result import Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import AuthSessionResponse
from .messages import LOGIN_SUCCESSFUL, auth_error
from .session_issuer import SessionIssuer

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session issuance.

    Business Rules:
    - Email and password are both required
    - Unknown email and wrong password are reported separately
    - Success stores a new session for the configured TTL
    - Store or lookup failures and lookup timeouts surface as DATABASE_ERROR,
      never raised
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_store: SessionStore,
        password_hasher: IPasswordHasher,
        session_ttl_seconds: int = 86400,
        lookup_timeout_seconds: float = 5.0,
    ):
        self.uow = uow
        self.lookup_timeout_seconds = lookup_timeout_seconds
        self.password_hasher = password_hasher
        self.issuer = SessionIssuer(session_store, session_ttl_seconds)

    async def execute(self, email: str, password: str) -> Result[AuthSessionResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password (already decrypted by transport)

        Returns:
            Result with AuthSessionResponse carrying the session token, or Error
        """
        if not email or not password:
            logger.warning(
                "Login attempt with missing information "
                f"(email {'provided' if email else 'missing'})"
            )
            return Return.err(auth_error(ErrorCode.MISSING_INFORMATION))

        try:
            async with self.uow:
                user = await asyncio.wait_for(
                    self.uow.users.get_by_email(email), self.lookup_timeout_seconds
                )
                password_hash = user.password_hash if user else None

            if password_hash is None:
                logger.warning(f"Login attempt for non-existent email: {email}")
                return Return.err(auth_error(ErrorCode.EMAIL_NOT_FOUND))

            if not await self.password_hasher.compare(password, password_hash):
                logger.warning(f"Login attempt with incorrect password: {email}")
                return Return.err(auth_error(ErrorCode.INCORRECT_PASSWORD))

            session_token = await self.issuer.issue(email)
        except Exception:
            logger.exception("Login error")
            return Return.err(auth_error(ErrorCode.DATABASE_ERROR))

        logger.info(f"User logged in successfully: {email}")
        return Return.ok(
            AuthSessionResponse(
                success=True,
                session_token=session_token,
                message=LOGIN_SUCCESSFUL,
            )
        )
