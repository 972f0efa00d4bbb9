"""
Post Repository Port - Interface for post persistence.
Implementations: microblog/infrastructure/persistence/{memory,prisma}_post_repository.py

An id that was never issued resolves to None, not an error.
"""

from abc import ABC, abstractmethod
from typing import Optional
from microblog.domain.entities.post import Post
from microblog.domain.value_objects.post_id import PostId


class PostRepository(ABC):
    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Optional[Post]: ...

    @abstractmethod
    async def list_recent(self) -> list[Post]:
        """All posts, newest first."""
        ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def save(self, post: Post) -> None: ...

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool: ...
