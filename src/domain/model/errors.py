"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class AuthenticationError(DomainError):
    """Caller could not be authenticated."""


class DuplicateAccountError(DuplicateError):
    """An account with this email is already registered."""


class UnknownAccountError(AuthenticationError):
    """No account is registered under this email."""


class BadCredentialError(AuthenticationError):
    """Password does not match the stored hash."""


class UnauthenticatedError(AuthenticationError):
    """Bearer token is missing, invalid, expired or revoked."""


class ProfileNotFoundError(NotFoundError):
    """Authenticated email no longer resolves to an account."""


class InvalidFormatError(ValidationError):
    """A profile field is malformed."""


class InvalidCodeError(ValidationError):
    """Submitted verification code is wrong, expired or already used."""


class StoreUnavailableError(DomainError):
    """The credential store failed or could not be reached."""


class NotificationError(DomainError):
    """An outbound email or SMS could not be delivered."""
