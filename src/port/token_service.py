from datetime import datetime
from typing import Any, Protocol


class TokenService(Protocol):
    """Protocol for issuing and verifying signed, time-bounded bearer tokens."""
    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        """Sign claims with the configured TTL counted from ``now``."""
        ...

    def verify(self, token: str) -> dict[str, Any] | None:
        """Return the claims if signature and expiry check out, else None."""
        ...
