"""Collaborator wiring.

Collaborators are built once at startup (see init_app_state) and stored on
``app.state``; request dependencies only hand them out.
"""

from datetime import timedelta

from fastapi import HTTPException, Request

from adapter.mongodb.connection import create_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.notification.smtp_email import SmtpEmailSender
from adapter.notification.twilio_sms import TwilioSmsSender
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_tokens import JoseTokenService
from port.notifier import EmailSender, SmsSender
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from utils.config import Settings


def init_app_state(state, settings: Settings) -> None:
    """Construct every external client exactly once."""
    state.settings = settings
    state.mongo_client = create_mongodb_client(settings.mongo_url)
    state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    state.token_service = JoseTokenService(
        settings.jwt_secret_key,
        expiration=timedelta(minutes=settings.jwt_expiration_minutes),
    )
    state.email_sender = SmtpEmailSender(
        server=settings.smtp_server,
        port=settings.smtp_port,
        user=settings.smtp_user,
        password=settings.smtp_password,
        sender=settings.email_from,
    )
    state.sms_sender = TwilioSmsSender(
        account_sid=settings.twilio_account_sid,
        auth_token=settings.twilio_auth_token,
        from_number=settings.twilio_from_number,
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _get_db(request: Request):
    """Get MongoDB database, raising 503 if unavailable."""
    client = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[request.app.state.settings.mongodb_database]


def get_user_repo(request: Request) -> UserRepository:
    return MongoUserRepository(_get_db(request))


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


def get_sms_sender(request: Request) -> SmsSender:
    return request.app.state.sms_sender
