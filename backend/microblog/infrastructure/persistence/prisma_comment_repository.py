"""
Prisma Comment Repository Implementation.

Mapping:
- Prisma: id / post_id / user_id (str) ←→ CommentId / PostId / UserId
- Comments are append-only; save() creates
"""

from prisma import Prisma
from prisma.models import Comment as PrismaComment
from microblog.domain.entities.comment import Comment
from microblog.domain.ports.repositories import CommentRepository
from microblog.domain.value_objects.comment_id import CommentId
from microblog.domain.value_objects.post_id import PostId
from microblog.domain.value_objects.user_id import UserId


class PrismaCommentRepository(CommentRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=CommentId(record.id),
            post_id=PostId(record.post_id),
            user_id=UserId(record.user_id),
            message=record.message,
            created_at=record.created_at,
        )

    async def get_by_post(self, post_id: PostId) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"post_id": post_id.value},
            order={"created_at": "asc"},
        )
        return [self._to_entity(r) for r in records]

    async def save(self, comment: Comment) -> None:
        await self._prisma.comment.create(
            data={
                "id": comment.id.value,
                "post_id": comment.post_id.value,
                "user_id": comment.user_id.value,
                "message": comment.message,
                "created_at": comment.created_at,
            }
        )

    async def delete_by_post(self, post_id: PostId) -> int:
        return await self._prisma.comment.delete_many(
            where={"post_id": post_id.value}
        )
