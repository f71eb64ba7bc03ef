"""Password verification strategies selected by ``settings.CREDENTIAL_VERIFIER``."""
import hmac

from django.contrib.auth.hashers import check_password

from .protocols import CredentialVerifierProtocol


class HashedCredentialVerifier:
    """Checks against a Django password hash (``algorithm$...``)."""

    def verify(self, raw: str, stored: str) -> bool:
        if not raw or not stored:
            return False
        return check_password(raw, stored)


class PlaintextCredentialVerifier:
    """
    Compares the stored value verbatim.

    Only meant for legacy accounts imported without hashing; it offers no
    protection if the user table leaks.
    """

    def verify(self, raw: str, stored: str) -> bool:
        if raw is None or stored is None:
            return False
        return hmac.compare_digest(raw.encode("utf-8"), stored.encode("utf-8"))


VERIFIERS = {
    "hashed": HashedCredentialVerifier,
    "plaintext": PlaintextCredentialVerifier,
}


def build_credential_verifier(name: str) -> CredentialVerifierProtocol:
    try:
        return VERIFIERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown credential verifier: {name!r}") from None
