"""
Comment Repository Port - Interface for comment persistence.
Implementations: microblog/infrastructure/persistence/{memory,prisma}_comment_repository.py
"""

from abc import ABC, abstractmethod
from microblog.domain.entities.comment import Comment
from microblog.domain.value_objects.post_id import PostId


class CommentRepository(ABC):
    @abstractmethod
    async def get_by_post(self, post_id: PostId) -> list[Comment]:
        """Comments on a post, oldest first."""
        ...

    @abstractmethod
    async def save(self, comment: Comment) -> None: ...

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int: ...
