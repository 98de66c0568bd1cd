"""In-memory notification senders that record outgoing messages."""

from dataclasses import dataclass

from domain.model.errors import NotificationError


@dataclass
class SentEmail:
    to: str
    subject: str
    body: str


@dataclass
class SentSms:
    to: str
    body: str


class FakeEmailSender:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[SentEmail] = []

    def send(self, to: str, subject: str, body: str) -> None:
        if self.fail:
            raise NotificationError("Fake SMTP failure")
        self.sent.append(SentEmail(to=to, subject=subject, body=body))


class FakeSmsSender:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[SentSms] = []

    async def send(self, to: str, body: str) -> None:
        if self.fail:
            raise NotificationError("Fake SMS provider failure")
        self.sent.append(SentSms(to=to, body=body))
