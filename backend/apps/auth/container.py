from __future__ import annotations

from django.conf import settings

from apps.users.repositories import UserRepository
from .credentials import build_credential_verifier
from .services import AuthService


def build_auth_service() -> AuthService:
    return AuthService(
        users=UserRepository(),
        verifier=build_credential_verifier(settings.CREDENTIAL_VERIFIER),
    )
