from .dtos import UserSummaryDTO
from .models import User


class UserMapper:
    @staticmethod
    def to_summary(user: User) -> UserSummaryDTO:
        return UserSummaryDTO(
            id=user.id,
            username=user.username,
            email=user.email or "",
            role=user.role,
        )
