from datetime import datetime
from typing import Any, Protocol

from domain.model.user import Profile, User


class UserRepository(Protocol):
    """Protocol defining the interface for account data access.

    Implementations raise StoreUnavailableError when the backing store fails
    and DuplicateAccountError when an insert collides on email.
    """
    def create(self, email: str, password_hash: str, profile: Profile) -> User:
        """Insert a new unconfirmed account and return it."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find an account by email. Return User or None if not found."""
        ...

    def update_profile(
        self,
        email: str,
        changes: dict[str, Any],
        verification_code: str,
        code_expires_at: datetime,
    ) -> User | None:
        """Apply profile changes and store a new verification code in one write.

        Return the updated User or None if no account matches.
        """
        ...

    def mark_confirmed(self, email: str, verification_code: str) -> bool:
        """Set the confirmed flag and clear the pending code.

        Only applies while the stored code is still verification_code.
        Return True if an account matched.
        """
        ...

    def bump_token_version(self, email: str) -> int | None:
        """Increment the token epoch. Return the new value or None if not found."""
        ...

    def update_last_login(self, email: str) -> bool:
        """Update the last login timestamp. Return True if successful."""
        ...
