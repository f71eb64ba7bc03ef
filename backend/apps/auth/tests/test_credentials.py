import unittest

from django.contrib.auth.hashers import make_password
from django.test import SimpleTestCase, override_settings

from apps.auth.credentials import (
    HashedCredentialVerifier,
    PlaintextCredentialVerifier,
    build_credential_verifier,
)


class PlaintextVerifierTests(unittest.TestCase):
    def test_exact_match_only(self):
        verifier = PlaintextCredentialVerifier()
        self.assertTrue(verifier.verify("s3cret", "s3cret"))
        self.assertFalse(verifier.verify("s3cret", "S3cret"))
        self.assertFalse(verifier.verify("s3cret", None))


@override_settings(PASSWORD_HASHERS=["django.contrib.auth.hashers.MD5PasswordHasher"])
class HashedVerifierTests(SimpleTestCase):
    def test_checks_against_hash(self):
        verifier = HashedCredentialVerifier()
        stored = make_password("s3cret")
        self.assertTrue(verifier.verify("s3cret", stored))
        self.assertFalse(verifier.verify("wrong", stored))

    def test_plaintext_stored_value_never_matches(self):
        self.assertFalse(HashedCredentialVerifier().verify("s3cret", "s3cret"))

    def test_empty_inputs(self):
        self.assertFalse(HashedCredentialVerifier().verify("", make_password("")))


class BuildVerifierTests(unittest.TestCase):
    def test_known_names(self):
        self.assertIsInstance(build_credential_verifier("hashed"), HashedCredentialVerifier)
        self.assertIsInstance(build_credential_verifier("PLAINTEXT"), PlaintextCredentialVerifier)

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            build_credential_verifier("bcrypt-ish")
