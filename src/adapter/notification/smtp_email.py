"""SMTP implementation of EmailSender."""

import logging
import smtplib
from email.message import EmailMessage

from domain.model.errors import NotificationError

logger = logging.getLogger(__name__)

SMTP_TIMEOUT_SECONDS = 10


class SmtpEmailSender:
    """Sends plain-text mail over SMTP with implicit TLS (e.g. Gmail on 465)."""

    def __init__(self, server: str, port: int, user: str, password: str, sender: str | None = None):
        self.server = server
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender or user

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.sender
        msg["To"] = to
        msg.set_content(body)
        return msg

    def send(self, to: str, subject: str, body: str) -> None:
        msg = self._build_message(to, subject, body)
        try:
            with smtplib.SMTP_SSL(self.server, self.port, timeout=SMTP_TIMEOUT_SECONDS) as smtp:
                smtp.login(self.user, self.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"SMTP delivery to {to} failed: {e}") from e

        logger.info("Email sent", extra={"to": to, "subject": subject})
