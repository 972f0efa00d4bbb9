"""In-memory Comment Repository."""

from dataclasses import replace

from microblog.domain.entities.comment import Comment
from microblog.domain.ports.repositories import CommentRepository
from microblog.domain.value_objects.post_id import PostId


class InMemoryCommentRepository(CommentRepository):
    def __init__(self):
        self._comments: dict[str, Comment] = {}

    async def get_by_post(self, post_id: PostId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return [replace(c) for c in comments]

    async def save(self, comment: Comment) -> None:
        self._comments[comment.id.value] = replace(comment)

    async def delete_by_post(self, post_id: PostId) -> int:
        doomed = [k for k, c in self._comments.items() if c.post_id == post_id]
        for key in doomed:
            del self._comments[key]
        return len(doomed)
