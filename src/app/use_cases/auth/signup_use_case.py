import asyncio
import logging

from src.libs.result import Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode, User
from .dtos import AuthSessionResponse, SignupCommand
from .messages import SIGNUP_SUCCESSFUL, auth_error
from .session_issuer import SessionIssuer

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (password already decrypted by transport)
    - Output: Result[AuthSessionResponse]

    Business Logic:
    1. Require email and password
    2. Reject an email that is already registered
    3. Hash the password with bcrypt
    4. Create the User and commit
    5. Open a session exactly as login does
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

    async def execute(self, command: SignupCommand) -> Result[AuthSessionResponse]:
        if not command.email or not command.encrypted_password:
            logger.warning(
                "Signup attempt with missing information "
                f"(email {'provided' if command.email else 'missing'})"
            )
            return Return.err(auth_error(ErrorCode.MISSING_INFORMATION))

        try:
            async with self.uow:
                existing_user = await asyncio.wait_for(
                    self.uow.users.get_by_email(command.email), self.lookup_timeout_seconds
                )
                if existing_user:
                    return Return.err(auth_error(ErrorCode.EMAIL_ALREADY_EXISTS))

                password_hash = await self.password_hasher.hash(command.encrypted_password)
                await asyncio.wait_for(
                    self._create_user(command.email, password_hash),
                    self.lookup_timeout_seconds,
                )

            session_token = await self.issuer.issue(command.email)
        except Exception:
            logger.exception("Signup error")
            return Return.err(auth_error(ErrorCode.DATABASE_ERROR))

        logger.info(f"User signed up: {command.email}")
        return Return.ok(
            AuthSessionResponse(
                success=True,
                session_token=session_token,
                message=SIGNUP_SUCCESSFUL,
            )
        )

    async def _create_user(self, email: str, password_hash: str) -> None:
        await self.uow.users.create(User(email=email, password_hash=password_hash))
        await self.uow.commit()
