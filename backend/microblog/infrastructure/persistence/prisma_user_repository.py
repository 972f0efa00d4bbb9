"""Prisma User Repository Implementation."""

from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import User as PrismaUser
from microblog.domain.entities.user import User
from microblog.domain.exceptions import EmailTakenError
from microblog.domain.ports.repositories import UserRepository
from microblog.domain.value_objects.user_email import UserEmail
from microblog.domain.value_objects.user_id import UserId


class PrismaUserRepository(UserRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        return User(
            id=UserId(record.id),
            email=UserEmail(record.email),
            password_hash=record.password_hash,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"email": email.value})
        return self._to_entity(record) if record else None

    async def save(self, user: User) -> None:
        """
        Raises:
            EmailTakenError: If a concurrent sign-up stored the email first
        """
        try:
            await self._prisma.user.upsert(
                where={"id": user.id.value},
                data={
                    "create": {
                        "id": user.id.value,
                        "email": user.email.value,
                        "password_hash": user.password_hash,
                        "created_at": user.created_at,
                        "updated_at": user.updated_at,
                    },
                    "update": {
                        "password_hash": user.password_hash,
                        "updated_at": user.updated_at,
                    },
                },
            )
        except UniqueViolationError:
            raise EmailTakenError() from None
