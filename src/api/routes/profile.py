"""Profile routes (read, update)."""

from datetime import timedelta

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from api.dependencies import get_email_sender, get_settings, get_sms_sender, get_user_repo
from api.models import ProfileResponse, ProfileUpdateRequest
from api.security import get_current_account
from domain.model.errors import InvalidFormatError, ProfileNotFoundError, StoreUnavailableError
from port.notifier import EmailSender, SmsSender
from port.user_repository import UserRepository
from services import profile_service
from services.notification_service import send_confirmation_email, send_welcome_sms
from utils.config import Settings

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(
    email: str = Depends(get_current_account),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get the authenticated account's profile."""
    try:
        user = profile_service.get_profile(repo, email)
    except ProfileNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User profile not found")
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get user profile"
        )

    return ProfileResponse.from_user(user)


@router.put("", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdateRequest,
    background_tasks: BackgroundTasks,
    email: str = Depends(get_current_account),
    repo: UserRepository = Depends(get_user_repo),
    email_sender: EmailSender = Depends(get_email_sender),
    sms_sender: SmsSender = Depends(get_sms_sender),
    settings: Settings = Depends(get_settings),
):
    """Update profile fields and send a fresh verification code.

    The confirmation email and the welcome SMS go out after the response;
    delivery problems are logged and do not affect the result.

    Raises:
        HTTPException: 400 on a malformed DNI/NIE, 404 if the account is gone,
            500 on store failure
    """
    try:
        user = profile_service.update_profile(
            repo,
            email,
            request.changes(),
            code_ttl=timedelta(minutes=settings.verification_code_ttl_minutes),
        )
    except InvalidFormatError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid DNI/NIE format")
    except ProfileNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User profile not found")
    except StoreUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update user profile"
        )

    background_tasks.add_task(send_confirmation_email, email_sender, user.email, user.verification_code)
    background_tasks.add_task(
        send_welcome_sms, sms_sender, user.profile.phone, user.profile.full_name, settings.app_name
    )
    return ProfileResponse.from_user(user)
