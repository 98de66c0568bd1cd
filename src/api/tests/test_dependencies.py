"""Unit tests for API dependencies and app-state wiring."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from fastapi import HTTPException

from adapter.mongodb.user_repository import MongoUserRepository
from adapter.notification.smtp_email import SmtpEmailSender
from adapter.notification.twilio_sms import TwilioSmsSender
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_tokens import JoseTokenService
from api.dependencies import get_user_repo, init_app_state
from api.tests.support import TEST_SETTINGS


def _request(state) -> SimpleNamespace:
    return SimpleNamespace(app=SimpleNamespace(state=state))


class TestGetUserRepo(unittest.TestCase):
    """Test cases for get_user_repo()."""

    def test_returns_mongo_repository(self):
        client = MagicMock()
        state = SimpleNamespace(mongo_client=client, settings=TEST_SETTINGS)

        repo = get_user_repo(_request(state))

        self.assertIsInstance(repo, MongoUserRepository)
        client.__getitem__.assert_called_with('accounts_test')

    def test_raises_503_without_client(self):
        state = SimpleNamespace(settings=TEST_SETTINGS)

        with self.assertRaises(HTTPException) as context:
            get_user_repo(_request(state))

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")


class TestInitAppState(unittest.TestCase):

    @patch('api.dependencies.create_mongodb_client')
    def test_builds_every_collaborator_once(self, mock_create_client):
        state = SimpleNamespace()

        init_app_state(state, TEST_SETTINGS)

        mock_create_client.assert_called_once_with('mongodb://localhost:27017')
        self.assertIs(state.settings, TEST_SETTINGS)
        self.assertIsInstance(state.password_hasher, BcryptPasswordHasher)
        self.assertEqual(state.password_hasher.rounds, 12)
        self.assertIsInstance(state.token_service, JoseTokenService)
        self.assertEqual(state.token_service.expiration.total_seconds(), 3600)
        self.assertIsInstance(state.email_sender, SmtpEmailSender)
        self.assertEqual(state.email_sender.sender, 'bot@example.com')
        self.assertIsInstance(state.sms_sender, TwilioSmsSender)
        self.assertEqual(state.sms_sender.from_number, '+13204387338')


if __name__ == '__main__':
    unittest.main()
