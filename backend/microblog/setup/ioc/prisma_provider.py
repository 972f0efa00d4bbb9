"""
Prisma store provider (STORE_BACKEND=prisma).

Run `prisma generate` (schema in backend/prisma/schema.prisma) before use.
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from microblog.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from microblog.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from microblog.infrastructure.persistence.prisma_post_repository import (
    PrismaPostRepository,
)
from microblog.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)


class PrismaStoreProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Connected once when first requested
        - Disconnected when the container is closed
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, prisma: Prisma) -> PostRepository:
        return PrismaPostRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)
