"""
User Repository Port - Interface for user persistence.
Implementations: microblog/infrastructure/persistence/{memory,prisma}_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from microblog.domain.entities.user import User
from microblog.domain.value_objects.user_email import UserEmail
from microblog.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...
