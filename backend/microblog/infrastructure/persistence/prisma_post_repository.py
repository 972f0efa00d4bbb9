"""
Prisma Post Repository Implementation.

- Implements PostRepository port from domain layer
- Maps between Prisma models and domain entities
- All methods are async

Prisma Post Model (from prisma/schema.prisma):
    model Post {
        id         String   @id @default(uuid())
        message    String
        user_id    String?
        created_at DateTime @default(now())
        updated_at DateTime @updatedAt
    }

Mapping:
- Prisma: id (str) ←→ Domain: id (PostId)
- Prisma: user_id (str | None) ←→ Domain: user_id (UserId | None)
- user_id is written on create only; updates never touch ownership
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Post as PrismaPost
from microblog.domain.entities.post import Post
from microblog.domain.ports.repositories import PostRepository
from microblog.domain.value_objects.post_id import PostId
from microblog.domain.value_objects.user_id import UserId


class PrismaPostRepository(PostRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPost) -> Post:
        """Map Prisma record to domain entity."""
        return Post(
            id=PostId(record.id),
            message=record.message,
            created_at=record.created_at,
            updated_at=record.updated_at,
            user_id=UserId(record.user_id) if record.user_id else None,
        )

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        record = await self._prisma.post.find_unique(where={"id": post_id.value})
        return self._to_entity(record) if record else None

    async def list_recent(self) -> list[Post]:
        records = await self._prisma.post.find_many(order={"created_at": "desc"})
        return [self._to_entity(record) for record in records]

    async def count(self) -> int:
        return await self._prisma.post.count()

    async def save(self, post: Post) -> None:
        """Save (create or update) post."""
        await self._prisma.post.upsert(
            where={"id": post.id.value},
            data={
                "create": {
                    "id": post.id.value,
                    "message": post.message,
                    "user_id": post.user_id.value if post.user_id else None,
                    "created_at": post.created_at,
                    "updated_at": post.updated_at,
                },
                "update": {
                    "message": post.message,
                    "updated_at": post.updated_at,
                },
            },
        )

    async def delete(self, post_id: PostId) -> bool:
        """Delete post by ID. Returns True if a row was removed."""
        record = await self._prisma.post.delete(where={"id": post_id.value})
        return record is not None
