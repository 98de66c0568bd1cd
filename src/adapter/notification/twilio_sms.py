"""Twilio Messages API implementation of SmsSender.

API Documentation: https://www.twilio.com/docs/messaging/api/message-resource
"""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.errors import NotificationError

logger = logging.getLogger(__name__)

TWILIO_API_BASE_URL = "https://api.twilio.com/2010-04-01"
API_TIMEOUT_SECONDS = 10.0


class TwilioSmsSender:
    """Sends SMS through Twilio's REST API."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self._transport = transport

    @property
    def messages_url(self) -> str:
        return f"{TWILIO_API_BASE_URL}/Accounts/{self.account_sid}/Messages.json"

    async def send(self, to: str, body: str) -> None:
        if not to:
            raise NotificationError("No destination phone number")

        data = {"To": to, "From": self.from_number, "Body": body}
        try:
            async with httpx.AsyncClient(
                auth=(self.account_sid, self.auth_token),
                timeout=API_TIMEOUT_SECONDS,
                transport=self._transport,
            ) as client:
                response = await _post_with_retry(client, self.messages_url, data)
        except httpx.HTTPError as e:
            raise NotificationError(f"Twilio request failed: {e}") from e

        if response.status_code >= 400:
            raise NotificationError(
                f"Twilio rejected message ({response.status_code}): {_error_message(response)}"
            )

        logger.info("SMS sent", extra={"sid": _message_sid(response)})


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("message", response.text)
    except ValueError:
        return response.text[:200]


def _message_sid(response: httpx.Response) -> str | None:
    try:
        return response.json().get("sid")
    except ValueError:
        return None


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _post_with_retry(client: httpx.AsyncClient, url: str, data: dict) -> httpx.Response:
    """POST form data with automatic retry on transient failures."""
    return await client.post(url, data=data)
