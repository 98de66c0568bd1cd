"""Pydantic models for API request/response.

Wire names are camelCase (``lastName``, ``dateOfBirth``) and the national ID
travels as ``dniNie``; snake_case names are accepted on input as well.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from domain.model.user import PROFILE_FIELDS, Profile, User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileFields(CamelModel):
    """Optional personal details shared by register, update and read."""
    name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    national_id: Optional[str] = Field(None, alias="dniNie", description="Spanish DNI or NIE")
    gender: Optional[str] = None
    date_of_birth: Optional[date] = None
    phone: Optional[str] = Field(None, description="E.164 phone number used for SMS")

    def to_profile(self) -> Profile:
        return Profile(**{name: getattr(self, name) for name in PROFILE_FIELDS})

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(include=set(PROFILE_FIELDS), exclude_unset=True)


class RegisterRequest(ProfileFields):
    """Request model for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    """Request model for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(ProfileFields):
    """Request model for profile update. Omitted fields are left untouched."""


class VerifyRequest(CamelModel):
    """Request model for email verification."""
    email: EmailStr
    verification_code: str = Field(..., min_length=1, max_length=32)

    @field_validator('verification_code', mode='before')
    @classmethod
    def code_to_str(cls, v):
        """Clients may send the numeric code as a JSON number."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ProfileResponse(ProfileFields):
    """Profile view. Never carries the password hash or the pending code."""
    email: str
    is_confirmed: bool = False

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            email=user.email,
            is_confirmed=user.is_confirmed,
            **{name: getattr(user.profile, name) for name in PROFILE_FIELDS},
        )
