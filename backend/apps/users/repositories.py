from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_username(self, username: str):
        return self.model.objects.filter(username=username).first()

    def exists(self, user_id: int) -> bool:
        return self.model.objects.filter(id=user_id).exists()
