from dataclasses import dataclass


@dataclass
class UserSummaryDTO:
    id: int
    username: str
    email: str
    role: str
