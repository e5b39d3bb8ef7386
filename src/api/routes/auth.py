from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import UNAUTHORIZED, ClientError, ServerError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_sender import ResetTokenSender
from src.app.services.token_codec import TokenCodec
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    AuthResponse,
    MeResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.app.use_cases.users import LoadIdentityUseCase
from src.depends import (
    AuthenticatedIdentity,
    get_current_identity,
    get_password_hasher,
    get_reset_token_sender,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenCodec = Depends(get_token_codec),
):
    """
    User Registration

    Creates a new account and returns a session token for it.

    Raises:
        - 400 Bad Request: Missing email or password
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password)

    use_case = RegisterUseCase(uow, hasher, tokens)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenCodec = Depends(get_token_codec),
):
    """
    User Login

    Authenticates user and returns a session token.

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Invalid credentials (unknown email or wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, hasher, tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: str = Field(..., min_length=1, description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenCodec = Depends(get_token_codec),
    sender: ResetTokenSender = Depends(get_reset_token_sender),
):
    """
    Request Password Reset

    Issues a reset token for a known email and delivers it out-of-band.

    Security:
        - No email enumeration (same response for known/unknown emails)

    Returns:
        - 200 OK: Always returns the generic acknowledgement
        - 400 Bad Request: Missing email
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow, tokens, sender)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Confirm password reset HTTP request payload"""

    token: str = Field(..., min_length=1, description="Password reset token")
    password: str = Field(..., min_length=1, description="New password")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenCodec = Depends(get_token_codec),
):
    """
    Confirm Password Reset

    Validates the reset token and replaces the user's password.
    Does not log the user in.

    Raises:
        - 400 Bad Request: Missing token or password
        - 401 Unauthorized: Invalid, expired or already used token
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, hasher, tokens)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_PASSWORD":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(
    identity: AuthenticatedIdentity = Depends(get_current_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User

    Returns the user the bearer token was issued to.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token, or user gone
        - 500 Internal Server Error: Server error
    """
    use_case = LoadIdentityUseCase(uow)
    result = await use_case.execute(identity.identity_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            # Token outlived its user: same answer as any other bad credential
            raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
