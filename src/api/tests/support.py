"""Shared wiring for route tests: the real app with fake collaborators."""

import unittest

from fastapi.testclient import TestClient

from adapter.fake.notifier import FakeEmailSender, FakeSmsSender
from adapter.fake.password_hasher import FakePasswordHasher
from adapter.fake.user_repository import FakeUserRepository
from adapter.security.jwt_tokens import JoseTokenService
from api.dependencies import (
    get_email_sender,
    get_password_hasher,
    get_settings,
    get_sms_sender,
    get_token_service,
    get_user_repo,
)
from api.main import app
from utils.config import Settings

TEST_SETTINGS = Settings(
    mongo_url="mongodb://localhost:27017",
    jwt_secret_key="test-secret",
    smtp_user="bot@example.com",
    smtp_password="app-password",
    twilio_account_sid="AC123",
    twilio_auth_token="twilio-token",
    twilio_from_number="+13204387338",
    mongodb_database="accounts_test",
    app_name="Miraklee",
)


class RouteTestCase(unittest.TestCase):
    """Overrides every collaborator dependency with an in-memory fake."""

    def setUp(self):
        self.repo = FakeUserRepository()
        self.hasher = FakePasswordHasher()
        self.tokens = JoseTokenService(TEST_SETTINGS.jwt_secret_key)
        self.email_sender = FakeEmailSender()
        self.sms_sender = FakeSmsSender()

        app.dependency_overrides[get_user_repo] = lambda: self.repo
        app.dependency_overrides[get_password_hasher] = lambda: self.hasher
        app.dependency_overrides[get_token_service] = lambda: self.tokens
        app.dependency_overrides[get_email_sender] = lambda: self.email_sender
        app.dependency_overrides[get_sms_sender] = lambda: self.sms_sender
        app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS
        self.client = TestClient(app)

    def tearDown(self):
        """Clean up dependency overrides."""
        app.dependency_overrides.clear()

    # ── helpers ──────────────────────────────────────────────

    def register(self, email='ana@example.com', password='S3cret-pass', **fields):
        return self.client.post('/register', json={'email': email, 'password': password, **fields})

    def login(self, email='ana@example.com', password='S3cret-pass') -> str:
        response = self.client.post('/login', json={'email': email, 'password': password})
        assert response.status_code == 200, response.text
        return response.json()['token']

    def auth(self, token: str) -> dict:
        return {'Authorization': f'Bearer {token}'}
