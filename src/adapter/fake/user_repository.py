"""In-memory implementation of UserRepository for testing."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from domain.model.errors import DuplicateAccountError, StoreUnavailableError
from domain.model.user import Profile, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        self.available = True

    def _check_available(self) -> None:
        if not self.available:
            raise StoreUnavailableError("Fake store is offline")

    # ── write operations ─────────────────────────────────────

    def create(self, email: str, password_hash: str, profile: Profile) -> User:
        self._check_available()
        if email in self.store:
            raise DuplicateAccountError("Email already registered")

        now = datetime.now(timezone.utc)
        user = User(
            id=uuid.uuid4().hex,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
            profile=replace(profile),
        )
        self.store[email] = user
        return replace(user)

    def update_profile(
        self,
        email: str,
        changes: dict[str, Any],
        verification_code: str,
        code_expires_at: datetime,
    ) -> User | None:
        self._check_available()
        user = self.store.get(email)
        if not user:
            return None

        user.profile = replace(user.profile, **changes)
        user.verification_code = verification_code
        user.verification_code_expires_at = code_expires_at
        user.updated_at = datetime.now(timezone.utc)
        return replace(user, profile=replace(user.profile))

    def mark_confirmed(self, email: str, verification_code: str) -> bool:
        self._check_available()
        user = self.store.get(email)
        if not user or user.verification_code != verification_code:
            return False

        user.is_confirmed = True
        user.verification_code = None
        user.verification_code_expires_at = None
        user.updated_at = datetime.now(timezone.utc)
        return True

    def bump_token_version(self, email: str) -> int | None:
        self._check_available()
        user = self.store.get(email)
        if not user:
            return None

        user.token_version += 1
        return user.token_version

    def update_last_login(self, email: str) -> bool:
        user = self.store.get(email)
        if not user:
            return False

        now = datetime.now(timezone.utc)
        user.last_login = now
        user.updated_at = now
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        self._check_available()
        user = self.store.get(email)
        return replace(user, profile=replace(user.profile)) if user else None
