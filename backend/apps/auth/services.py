from __future__ import annotations

from rest_framework_simplejwt.tokens import RefreshToken

from apps.api.exceptions import AccessDeniedError, InvalidCredentialsError
from apps.api.permissions import is_admin
from apps.common import get_logger
from apps.users.mappers import UserMapper
from apps.users.protocols import UserRepositoryProtocol
from .dtos import AuthResultDTO
from .protocols import CredentialVerifierProtocol

logger = get_logger(__name__).bind(component="auth", layer="service")

INVALID_CREDENTIALS = "Invalid credentials"
ADMIN_REQUIRED = "Access denied. Admin privileges required."


class AuthService:
    def __init__(self, users: UserRepositoryProtocol, verifier: CredentialVerifierProtocol):
        self.users = users
        self.verifier = verifier
        self.logger = logger.bind(service="AuthService")

    def authenticate(self, username: str, password: str) -> AuthResultDTO:
        user = self._check_credentials(username, password)
        self.logger.info("User logged in", user_id=user.id)
        return self._issue(user)

    def admin_login(self, username: str, password: str) -> AuthResultDTO:
        user = self._check_credentials(username, password)
        if not is_admin(user):
            self.logger.warning("Admin login rejected: not an admin", user_id=user.id)
            raise AccessDeniedError(ADMIN_REQUIRED)
        self.logger.info("Admin logged in", user_id=user.id)
        return self._issue(user)

    def _check_credentials(self, username: str, password: str):
        user = self.users.get_by_username(username)
        # Same error for unknown user and wrong password
        if not user or not getattr(user, "is_active", True):
            self.logger.warning("Login rejected: unknown or inactive user", username=username)
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        if not self.verifier.verify(password, user.password):
            self.logger.warning("Login rejected: bad password", user_id=user.id)
            raise InvalidCredentialsError(INVALID_CREDENTIALS)
        return user

    def _issue(self, user) -> AuthResultDTO:
        refresh = RefreshToken.for_user(user)
        return AuthResultDTO(
            user=UserMapper.to_summary(user),
            access=str(refresh.access_token),
            refresh=str(refresh),
        )
