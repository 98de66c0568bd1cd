"""Tests for load_settings()."""

import unittest

from utils.config import REQUIRED_VARS, ConfigError, load_settings

BASE_ENV = {
    "MONGO_URL": "mongodb://localhost:27017",
    "JWT_SECRET_KEY": "secret",
    "SMTP_USER": "bot@example.com",
    "SMTP_PASSWORD": "app-password",
    "TWILIO_ACCOUNT_SID": "AC123",
    "TWILIO_AUTH_TOKEN": "twilio-token",
    "TWILIO_FROM_NUMBER": "+13204387338",
}


class TestLoadSettings(unittest.TestCase):

    def test_defaults(self):
        settings = load_settings(dict(BASE_ENV))

        self.assertEqual(settings.mongo_url, "mongodb://localhost:27017")
        self.assertEqual(settings.port, 8000)
        self.assertEqual(settings.mongodb_database, "accounts")
        self.assertEqual(settings.smtp_server, "smtp.gmail.com")
        self.assertEqual(settings.smtp_port, 465)
        self.assertIsNone(settings.email_from)
        self.assertEqual(settings.jwt_expiration_minutes, 60)
        self.assertEqual(settings.bcrypt_rounds, 12)
        self.assertEqual(settings.verification_code_ttl_minutes, 1440)

    def test_overrides(self):
        env = dict(BASE_ENV, PORT="3000", MONGODB_DATABASE="acc_test",
                   JWT_EXPIRATION_MINUTES="15", EMAIL_FROM="no-reply@example.com")

        settings = load_settings(env)

        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.mongodb_database, "acc_test")
        self.assertEqual(settings.jwt_expiration_minutes, 15)
        self.assertEqual(settings.email_from, "no-reply@example.com")

    def test_every_required_variable_is_enforced(self):
        for name in REQUIRED_VARS:
            env = dict(BASE_ENV)
            env.pop(name)
            with self.assertRaises(ConfigError) as ctx:
                load_settings(env)
            self.assertIn(name, str(ctx.exception))

    def test_missing_variables_are_all_listed(self):
        with self.assertRaises(ConfigError) as ctx:
            load_settings({})
        for name in REQUIRED_VARS:
            self.assertIn(name, str(ctx.exception))

    def test_empty_value_counts_as_missing(self):
        with self.assertRaises(ConfigError):
            load_settings(dict(BASE_ENV, JWT_SECRET_KEY=""))

    def test_malformed_port(self):
        with self.assertRaises(ConfigError):
            load_settings(dict(BASE_ENV, PORT="eighty"))


if __name__ == '__main__':
    unittest.main()
