"""Account routes (register, login, verify, logout)."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from api.dependencies import (
    get_email_sender,
    get_password_hasher,
    get_settings,
    get_token_service,
    get_user_repo,
)
from api.models import LoginRequest, MessageResponse, RegisterRequest, TokenResponse, VerifyRequest
from api.security import get_current_account
from domain.model.errors import (
    AuthenticationError,
    DuplicateAccountError,
    InvalidCodeError,
    ProfileNotFoundError,
    StoreUnavailableError,
)
from port.notifier import EmailSender
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from services import auth_service, profile_service
from services.notification_service import send_welcome_email
from utils.config import Settings

router = APIRouter(tags=["accounts"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    background_tasks: BackgroundTasks,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
):
    """Register a new account and queue a welcome email.

    Raises:
        HTTPException: 409 if the email is taken, 500 on store failure
    """
    try:
        user = auth_service.register(repo, hasher, request.email, request.password, request.to_profile())
    except DuplicateAccountError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    except StoreUnavailableError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to register user")

    background_tasks.add_task(send_welcome_email, email_sender, user.email, user.profile.name, settings.app_name)
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Exchange email and password for a bearer token.

    Raises:
        HTTPException: 401 if credentials are invalid, 500 on store failure
    """
    try:
        user = auth_service.authenticate(repo, hasher, request.email, request.password)
    except AuthenticationError:
        # Same answer for unknown email and wrong password
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    except StoreUnavailableError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to log in")

    return TokenResponse(token=auth_service.issue_token(tokens, user))


@router.post("/verify", response_model=MessageResponse)
def verify(request: VerifyRequest, repo: UserRepository = Depends(get_user_repo)):
    """Confirm an account with the code sent after its last profile update."""
    try:
        profile_service.verify_email(repo, request.email, request.verification_code)
    except ProfileNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User profile not found")
    except InvalidCodeError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid verification code")
    except StoreUnavailableError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to verify account")

    return MessageResponse(message="Account confirmed")


@router.post("/logout", response_model=MessageResponse)
def logout(
    email: str = Depends(get_current_account),
    repo: UserRepository = Depends(get_user_repo),
):
    """End the session: every token issued so far stops being accepted."""
    try:
        auth_service.logout(repo, email)
    except StoreUnavailableError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to log out")

    return MessageResponse(message="Logged out successfully")
