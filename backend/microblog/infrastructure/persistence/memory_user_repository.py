"""In-memory User Repository. Emails are unique, as in the database."""

from dataclasses import replace
from typing import Optional

from microblog.domain.entities.user import User
from microblog.domain.exceptions import EmailTakenError
from microblog.domain.ports.repositories import UserRepository
from microblog.domain.value_objects.user_email import UserEmail
from microblog.domain.value_objects.user_id import UserId


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._users.get(user_id.value)
        return replace(user) if user else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return replace(user)
        return None

    async def save(self, user: User) -> None:
        for other in self._users.values():
            if other.email == user.email and other.id != user.id:
                raise EmailTakenError()
        self._users[user.id.value] = replace(user)
