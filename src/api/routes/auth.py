from typing import Any, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Header, status
from pydantic import BaseModel, ValidationError

from src.libs.result import Error
from src.api.error import ClientError
from src.api.utils.api_key_gate import require_api_key
from src.api.utils.decrypt_payload import decrypted_body
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthSessionResponse,
    GetSessionIdentityUseCase,
    LoginCommand,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    SessionIdentity,
    SessionTokenCommand,
    SessionVerificationResponse,
    SignupCommand,
    SignupUseCase,
    VerifySessionUseCase,
)
from src.app.use_cases.auth.messages import (
    LOGOUT_SUCCESSFUL,
    SESSION_EXPIRED,
    SESSION_INVALID,
    SESSION_VALID,
)
from src.domain.entities import ErrorCode, SessionVerificationReason
from src.depends import (
    get_config,
    get_password_hasher,
    get_session_store,
    get_unit_of_work,
)

# Key gate runs as a router dependency, so it resolves before the
# endpoint's decrypt gate.
router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(require_api_key)],
)

CommandT = TypeVar("CommandT", bound=BaseModel)


def parse_command(model: Type[CommandT], body: Any) -> CommandT:
    """Validate a (possibly decrypted) request body into a command"""
    try:
        return model.model_validate(body)
    except ValidationError:
        raise ClientError(
            Error("INVALID_REQUEST", "Invalid request body"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthSessionResponse,
    response_model_exclude_none=True,
)
async def login(
    body: Any = Depends(decrypted_body),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: SessionStore = Depends(get_session_store),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    config=Depends(get_config),
):
    """
    User Login

    Body: {email, password}, plaintext or encrypted envelope.
    Business failures (missing input, unknown email, wrong password,
    store failure) come back as success=false with HTTP 200.
    """
    command = parse_command(LoginCommand, body)

    use_case = LoginUseCase(
        uow,
        session_store,
        password_hasher,
        config.SESSION_TTL_SECONDS,
        config.GATE_TIMEOUT_SECONDS,
    )
    result = await use_case.execute(command.email, command.password)

    if result.is_err():
        error = result.error
        return AuthSessionResponse(success=False, message=error.message, code=error.code)

    return result.value


@router.post(
    "/signup",
    status_code=status.HTTP_200_OK,
    response_model=AuthSessionResponse,
    response_model_exclude_none=True,
)
async def signup(
    body: Any = Depends(decrypted_body),
    uow: UnitOfWork = Depends(get_unit_of_work),
    session_store: SessionStore = Depends(get_session_store),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    config=Depends(get_config),
):
    """
    User Signup

    Body: {email, encryptedPassword}. Creates the user and opens a session
    the same way login does.
    """
    command = parse_command(SignupCommand, body)

    use_case = SignupUseCase(
        uow,
        session_store,
        password_hasher,
        config.SESSION_TTL_SECONDS,
        config.GATE_TIMEOUT_SECONDS,
    )
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        return AuthSessionResponse(success=False, message=error.message, code=error.code)

    return result.value


@router.post(
    "/verify",
    status_code=status.HTTP_200_OK,
    response_model=SessionVerificationResponse,
)
async def verify_session(
    body: Any = Depends(decrypted_body),
    session_store: SessionStore = Depends(get_session_store),
):
    """
    Verify Session

    Tells an expired session apart from one that is invalid or never existed.
    """
    command = parse_command(SessionTokenCommand, body)

    verification = await VerifySessionUseCase(session_store).execute(command.session_token)

    if verification.valid:
        return SessionVerificationResponse(valid=True, message=SESSION_VALID, code=None)

    if verification.expired:
        return SessionVerificationResponse(
            valid=False,
            message=SESSION_EXPIRED,
            code=verification.code.value,
            reason=SessionVerificationReason.EXPIRED,
        )

    return SessionVerificationResponse(
        valid=False,
        message=SESSION_INVALID,
        code=verification.code.value,
        reason=SessionVerificationReason.INVALID,
    )


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    body: Any = Depends(decrypted_body),
    session_store: SessionStore = Depends(get_session_store),
):
    """Logout - always reports success, even for unknown sessions"""
    command = parse_command(SessionTokenCommand, body)

    await LogoutUseCase(session_store).execute(command.session_token)

    return LogoutResponse(message=LOGOUT_SUCCESSFUL)


@router.get("/me", status_code=status.HTTP_200_OK, response_model=SessionIdentity)
async def get_me(
    x_session_token: Optional[str] = Header(None),
    session_store: SessionStore = Depends(get_session_store),
):
    """
    Current session identity

    Reads the identity stored with the session named by X-Session-Token.

    Raises:
        - 401 Unauthorized: SESSION_INVALID when the session is absent or expired
    """
    identity = await GetSessionIdentityUseCase(session_store).execute(x_session_token)

    if identity is None:
        raise ClientError(
            Error(ErrorCode.SESSION_INVALID.value, SESSION_INVALID),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return identity
