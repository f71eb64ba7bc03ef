from dataclasses import dataclass

from apps.users.dtos import UserSummaryDTO


@dataclass
class AuthResultDTO:
    user: UserSummaryDTO
    access: str
    refresh: str
