"""Deterministic hasher for service tests, avoiding bcrypt cost per call."""


class FakePasswordHasher:
    PREFIX = "fake-hash::"

    def hash(self, password: str) -> str:
        return f"{self.PREFIX}{password[::-1]}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == self.hash(password)
