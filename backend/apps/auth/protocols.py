from typing import Protocol


class CredentialVerifierProtocol(Protocol):
    def verify(self, raw: str, stored: str) -> bool: ...
