"""Unit tests for the account domain model and the national-ID format check.

Tests focus on behavior the services rely on:
- User.code_matches (exact match, expiry, missing code)
- Profile.full_name (used in notification bodies)
- is_valid_national_id (accepted/rejected shapes)
"""

import unittest
from datetime import datetime, timedelta, timezone

from domain.model.national_id import is_valid_national_id
from domain.model.user import PROFILE_FIELDS, Profile, User

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _make_user(**kwargs) -> User:
    defaults = {
        "id": "user-1",
        "email": "ana@example.com",
        "password_hash": "hashed::secret",
        "created_at": NOW,
        "updated_at": NOW,
    }
    defaults.update(kwargs)
    return User(**defaults)


class TestCodeMatches(unittest.TestCase):
    """Tests for User.code_matches()."""

    def test_exact_code_matches(self):
        user = _make_user(verification_code="042917", verification_code_expires_at=NOW + timedelta(hours=1))
        self.assertTrue(user.code_matches("042917", NOW))

    def test_other_code_does_not_match(self):
        user = _make_user(verification_code="042917")
        self.assertFalse(user.code_matches("042918", NOW))
        self.assertFalse(user.code_matches("42917", NOW))

    def test_no_pending_code_never_matches(self):
        user = _make_user()
        self.assertFalse(user.code_matches("000000", NOW))
        self.assertFalse(user.code_matches("", NOW))

    def test_expired_code_does_not_match(self):
        user = _make_user(verification_code="123456", verification_code_expires_at=NOW)
        self.assertFalse(user.code_matches("123456", NOW))
        self.assertFalse(user.code_matches("123456", NOW + timedelta(seconds=1)))

    def test_code_without_expiry_matches(self):
        """Records written before expiry was tracked keep working."""
        user = _make_user(verification_code="123456", verification_code_expires_at=None)
        self.assertTrue(user.code_matches("123456", NOW))

    def test_non_ascii_submission_is_rejected(self):
        user = _make_user(verification_code="123456")
        self.assertFalse(user.code_matches("12345ñ", NOW))


class TestProfile(unittest.TestCase):

    def test_full_name_joins_present_parts(self):
        self.assertEqual(Profile(name="Ana", last_name="García").full_name, "Ana García")
        self.assertEqual(Profile(name="Ana").full_name, "Ana")
        self.assertEqual(Profile().full_name, "")

    def test_profile_fields_lists_every_field(self):
        self.assertIn("national_id", PROFILE_FIELDS)
        self.assertIn("date_of_birth", PROFILE_FIELDS)
        self.assertEqual(len(PROFILE_FIELDS), 9)


class TestNationalId(unittest.TestCase):
    """Tests for is_valid_national_id()."""

    def test_accepts_dni(self):
        self.assertTrue(is_valid_national_id("12345678Z"))

    def test_accepts_nie(self):
        self.assertTrue(is_valid_national_id("X1234567L"))
        self.assertTrue(is_valid_national_id("Y7654321B"))

    def test_case_insensitive(self):
        self.assertTrue(is_valid_national_id("x1234567l"))
        self.assertTrue(is_valid_national_id("12345678z"))

    def test_rejects_too_short(self):
        self.assertFalse(is_valid_national_id("1234567"))

    def test_rejects_non_ascii_letter(self):
        self.assertFalse(is_valid_national_id("12345678Ñ"))

    def test_rejects_excluded_letters(self):
        for letter in "IOUiou":
            self.assertFalse(is_valid_national_id(f"12345678{letter}"), letter)

    def test_rejects_bad_leading_character(self):
        self.assertFalse(is_valid_national_id("A1234567L"))

    def test_rejects_trailing_newline(self):
        self.assertFalse(is_valid_national_id("12345678Z\n"))

    def test_rejects_too_long(self):
        self.assertFalse(is_valid_national_id("123456789Z"))


if __name__ == '__main__':
    unittest.main()
