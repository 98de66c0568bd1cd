from typing import Protocol


class EmailSender(Protocol):
    """Outbound email transport. Raises NotificationError on failure."""
    def send(self, to: str, subject: str, body: str) -> None:
        ...


class SmsSender(Protocol):
    """Outbound SMS transport. Raises NotificationError on failure."""
    async def send(self, to: str, body: str) -> None:
        ...
