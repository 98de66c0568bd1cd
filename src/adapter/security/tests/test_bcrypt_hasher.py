"""Tests for BcryptPasswordHasher."""

import unittest

from adapter.security.bcrypt_hasher import BcryptPasswordHasher


class TestBcryptPasswordHasher(unittest.TestCase):

    def setUp(self):
        # Minimum cost keeps the suite fast
        self.hasher = BcryptPasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self):
        digest = self.hasher.hash("S3cret-pass")
        self.assertNotEqual(digest, "S3cret-pass")
        self.assertTrue(digest.startswith("$2b$04$"))

    def test_hash_is_salted(self):
        self.assertNotEqual(self.hasher.hash("S3cret-pass"), self.hasher.hash("S3cret-pass"))

    def test_verify_matching_password(self):
        digest = self.hasher.hash("S3cret-pass")
        self.assertTrue(self.hasher.verify("S3cret-pass", digest))

    def test_verify_other_password(self):
        digest = self.hasher.hash("S3cret-pass")
        self.assertFalse(self.hasher.verify("S3cret-pasS", digest))
        self.assertFalse(self.hasher.verify("", digest))

    def test_verify_non_bcrypt_hash(self):
        self.assertFalse(self.hasher.verify("S3cret-pass", "plaintext"))

    def test_default_rounds(self):
        self.assertEqual(BcryptPasswordHasher().rounds, 12)


if __name__ == '__main__':
    unittest.main()
