"""Profile service — profile read/update and email confirmation codes."""

import logging
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Any

from domain.model.errors import InvalidCodeError, InvalidFormatError, ProfileNotFoundError
from domain.model.national_id import is_valid_national_id
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

VERIFICATION_CODE_LENGTH = 6
VERIFICATION_CODE_TTL = timedelta(hours=24)


def generate_verification_code(length: int = VERIFICATION_CODE_LENGTH) -> str:
    return "".join(secrets.choice(string.digits) for _ in range(length))


def get_profile(repo: UserRepository, email: str) -> User:
    """Raises ProfileNotFoundError if the email no longer resolves to an account."""
    user = repo.get_by_email(email)
    if not user:
        raise ProfileNotFoundError("User profile not found")
    return user


def update_profile(
    repo: UserRepository,
    email: str,
    changes: dict[str, Any],
    code_ttl: timedelta = VERIFICATION_CODE_TTL,
    now: datetime | None = None,
) -> User:
    """Overwrite the given profile fields and issue a fresh verification code.

    Both land in the same store write, so a failure leaves neither applied.
    The returned User carries the new code for the confirmation email.

    Raises:
        InvalidFormatError: national_id is present but malformed
        ProfileNotFoundError: no account for this email
        StoreUnavailableError: the store failed
    """
    national_id = changes.get("national_id")
    if national_id and not is_valid_national_id(national_id):
        raise InvalidFormatError("Invalid DNI/NIE format")

    now = now or datetime.now(timezone.utc)
    code = generate_verification_code()
    user = repo.update_profile(email, changes, code, now + code_ttl)
    if not user:
        raise ProfileNotFoundError("User profile not found")

    logger.info("Profile updated", extra={"userId": user.id, "email": email})
    return user


def verify_email(repo: UserRepository, email: str, code: str, now: datetime | None = None) -> None:
    """Confirm an account with the code from its latest profile update.

    Codes are single-use and expire; a wrong, used or expired code is rejected.

    Raises:
        ProfileNotFoundError: no account for this email
        InvalidCodeError: code does not match the pending one
        StoreUnavailableError: the store failed
    """
    user = repo.get_by_email(email)
    if not user:
        raise ProfileNotFoundError("User profile not found")

    if not user.code_matches(code, now or datetime.now(timezone.utc)):
        logger.info("Verification code rejected", extra={"email": email})
        raise InvalidCodeError("Invalid verification code")

    # The write only lands if the checked code is still the pending one
    if not repo.mark_confirmed(email, user.verification_code):
        logger.info("Verification code superseded", extra={"email": email})
        raise InvalidCodeError("Invalid verification code")
    logger.info("Account confirmed", extra={"userId": user.id, "email": email})
