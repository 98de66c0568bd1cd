"""Auth service — registration, credential checks, bearer tokens and logout.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.errors import (
    BadCredentialError,
    DuplicateAccountError,
    UnauthenticatedError,
    UnknownAccountError,
)
from domain.model.user import Profile, User
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def register(
    repo: UserRepository,
    hasher: PasswordHasher,
    email: str,
    password: str,
    profile: Profile,
) -> User:
    """Register a new, unconfirmed account.

    Returns the created User domain object.

    Raises:
        DuplicateAccountError: email already registered
        StoreUnavailableError: the store failed
    """
    if repo.get_by_email(email):
        raise DuplicateAccountError("Email already registered")

    user = repo.create(email=email, password_hash=hasher.hash(password), profile=profile)
    logger.info("User registered", extra={"userId": user.id, "email": email})
    return user


def authenticate(repo: UserRepository, hasher: PasswordHasher, email: str, password: str) -> User:
    """Check email and password.

    Raises:
        UnknownAccountError: no account for this email
        BadCredentialError: password does not match
        StoreUnavailableError: the store failed
    """
    user = repo.get_by_email(email)
    if not user:
        raise UnknownAccountError("Email is not registered")
    if not hasher.verify(password, user.password_hash):
        raise BadCredentialError("Password is incorrect")

    # Login succeeds even if the timestamp write fails
    repo.update_last_login(email)
    logger.info("User logged in", extra={"userId": user.id, "email": email})
    return user


def issue_token(tokens: TokenService, user: User) -> str:
    """Issue a bearer token carrying only identifiers and the token epoch."""
    return tokens.issue({"sub": user.id, "email": user.email, "ver": user.token_version})


def resolve_token(repo: UserRepository, tokens: TokenService, token: str | None) -> str:
    """Return the email a bearer token was issued to.

    A token is refused when it is missing, badly signed or expired, or when the
    account it names has since logged out (token epoch moved on) or been
    replaced by a new account under the same email. If the account is gone
    entirely the email is still returned so callers can report it as missing.

    Raises:
        UnauthenticatedError: token not acceptable
        StoreUnavailableError: the store failed
    """
    if not token:
        raise UnauthenticatedError("No authentication token provided")

    claims = tokens.verify(token)
    email = claims.get("email") if claims else None
    if not email:
        raise UnauthenticatedError("Invalid authentication token")

    user = repo.get_by_email(email)
    if user:
        if claims.get("sub") != user.id or claims.get("ver", 0) < user.token_version:
            raise UnauthenticatedError("Authentication token has been revoked")
    return email


def logout(repo: UserRepository, email: str) -> None:
    """Revoke every token issued to this account so far.

    Always succeeds for an authenticated caller, even if the account was removed.
    """
    version = repo.bump_token_version(email)
    logger.info("User logged out", extra={"email": email, "tokenVersion": version})
