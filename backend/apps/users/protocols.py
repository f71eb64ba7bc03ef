from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["User"]: ...

    def get_by_username(self, username: str) -> Optional["User"]: ...

    def exists(self, user_id: int) -> bool: ...

    def count(self, **filters) -> int: ...
