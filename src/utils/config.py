"""Environment-driven settings.

Values come from the process environment; a local .env file is loaded first
by the entry point (python-dotenv).
"""

import os
from dataclasses import dataclass

REQUIRED_VARS = (
    "MONGO_URL",
    "JWT_SECRET_KEY",
    "SMTP_USER",
    "SMTP_PASSWORD",
    "TWILIO_ACCOUNT_SID",
    "TWILIO_AUTH_TOKEN",
    "TWILIO_FROM_NUMBER",
)


class ConfigError(ValueError):
    """Required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    mongo_url: str
    jwt_secret_key: str
    smtp_user: str
    smtp_password: str
    twilio_account_sid: str
    twilio_auth_token: str
    twilio_from_number: str
    port: int = 8000
    mongodb_database: str = "accounts"
    smtp_server: str = "smtp.gmail.com"
    smtp_port: int = 465
    email_from: str | None = None
    jwt_expiration_minutes: int = 60
    bcrypt_rounds: int = 12
    verification_code_ttl_minutes: int = 24 * 60
    app_name: str = "Miraklee"


def _int_env(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env=None) -> Settings:
    """Build Settings from the environment.

    Raises:
        ConfigError: a required variable is unset or an integer is malformed
    """
    env = os.environ if env is None else env
    missing = [name for name in REQUIRED_VARS if not env.get(name)]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Generate JWT_SECRET_KEY with: openssl rand -hex 32"
        )

    return Settings(
        mongo_url=env["MONGO_URL"],
        jwt_secret_key=env["JWT_SECRET_KEY"],
        smtp_user=env["SMTP_USER"],
        smtp_password=env["SMTP_PASSWORD"],
        twilio_account_sid=env["TWILIO_ACCOUNT_SID"],
        twilio_auth_token=env["TWILIO_AUTH_TOKEN"],
        twilio_from_number=env["TWILIO_FROM_NUMBER"],
        port=_int_env(env, "PORT", 8000),
        mongodb_database=env.get("MONGODB_DATABASE") or "accounts",
        smtp_server=env.get("SMTP_SERVER") or "smtp.gmail.com",
        smtp_port=_int_env(env, "SMTP_PORT", 465),
        email_from=env.get("EMAIL_FROM") or None,
        jwt_expiration_minutes=_int_env(env, "JWT_EXPIRATION_MINUTES", 60),
        bcrypt_rounds=_int_env(env, "BCRYPT_ROUNDS", 12),
        verification_code_ttl_minutes=_int_env(env, "VERIFICATION_CODE_TTL_MINUTES", 24 * 60),
        app_name=env.get("APP_NAME") or "Miraklee",
    )
