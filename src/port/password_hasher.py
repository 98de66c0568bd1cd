from typing import Protocol


class PasswordHasher(Protocol):
    """Protocol for one-way salted password hashing."""
    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        ...
