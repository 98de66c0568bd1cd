import hmac
from dataclasses import dataclass, field, fields
from datetime import date, datetime


@dataclass
class Profile:
    """Free-form personal details attached to an account. All optional."""
    name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    national_id: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    phone: str | None = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.name, self.last_name) if part)


PROFILE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Profile))


@dataclass
class User:
    """Domain model representing an account."""
    id: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    profile: Profile = field(default_factory=Profile)
    verification_code: str | None = None
    verification_code_expires_at: datetime | None = None
    is_confirmed: bool = False
    token_version: int = 0
    last_login: datetime | None = None

    def code_matches(self, code: str, now: datetime) -> bool:
        """Check a submitted code against the pending one, honouring expiry."""
        if not self.verification_code or not code:
            return False
        if self.verification_code_expires_at and now >= self.verification_code_expires_at:
            return False
        return hmac.compare_digest(self.verification_code.encode("utf-8"), code.encode("utf-8"))
