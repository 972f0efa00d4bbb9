"""
In-memory Post Repository.

Keeps posts in a dict keyed by id. Each method completes without awaiting,
so every operation is atomic on the event loop. Entities are copied on the
way in and out, so callers never hold a reference to stored state.
"""

from dataclasses import replace
from typing import Optional

from microblog.domain.entities.post import Post
from microblog.domain.ports.repositories import PostRepository
from microblog.domain.value_objects.post_id import PostId


class InMemoryPostRepository(PostRepository):
    def __init__(self):
        self._posts: dict[str, Post] = {}

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        post = self._posts.get(post_id.value)
        return replace(post) if post else None

    async def list_recent(self) -> list[Post]:
        posts = sorted(
            reversed(list(self._posts.values())),
            key=lambda p: p.created_at,
            reverse=True,
        )
        return [replace(p) for p in posts]

    async def count(self) -> int:
        return len(self._posts)

    async def save(self, post: Post) -> None:
        self._posts[post.id.value] = replace(post)

    async def delete(self, post_id: PostId) -> bool:
        return self._posts.pop(post_id.value, None) is not None
