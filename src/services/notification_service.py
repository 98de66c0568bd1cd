"""Account notifications.

Every send here is best-effort: a delivery failure is logged and reported as
False, never raised, so it cannot change the outcome of the request that
triggered it. Route handlers schedule these as background tasks.
"""

import logging

from domain.model.errors import NotificationError
from port.notifier import EmailSender, SmsSender

logger = logging.getLogger(__name__)


def send_welcome_email(sender: EmailSender, email: str, name: str | None, app_name: str) -> bool:
    greeting = f"Welcome, {name}!" if name else "Welcome!"
    try:
        sender.send(
            email,
            f"Welcome to {app_name}",
            f"{greeting} Thanks for signing up for {app_name}.",
        )
    except NotificationError as e:
        logger.error("Failed to send welcome email", extra={"email": email, "error": str(e)})
        return False
    return True


def send_confirmation_email(sender: EmailSender, email: str, code: str) -> bool:
    try:
        sender.send(email, "Confirm your email address", f"Your verification code is: {code}")
    except NotificationError as e:
        logger.error("Failed to send confirmation email", extra={"email": email, "error": str(e)})
        return False
    return True


async def send_welcome_sms(sender: SmsSender, phone: str | None, full_name: str, app_name: str) -> bool:
    if not phone:
        logger.info("Skipping welcome SMS: no phone number on profile")
        return False

    greeting = f"Welcome to {app_name}, {full_name}!" if full_name else f"Welcome to {app_name}!"
    try:
        await sender.send(phone, f"{greeting} Thanks for signing up.")
    except NotificationError as e:
        logger.error("Failed to send welcome SMS", extra={"error": str(e)})
        return False
    return True
