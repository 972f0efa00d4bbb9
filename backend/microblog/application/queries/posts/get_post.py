"""
GetPost Query - A single post with its comments, for the show page.

Anyone may read a post; no signed-in user is needed.
"""

from dataclasses import dataclass

from microblog.application.common.interfaces import Query, QueryHandler
from microblog.domain.entities.comment import Comment
from microblog.domain.entities.post import Post
from microblog.domain.exceptions import EntityNotFoundError
from microblog.domain.ports.repositories import CommentRepository, PostRepository
from microblog.domain.value_objects.post_id import PostId


@dataclass
class PostDetails:
    """Result containing the post and its comments, oldest comment first."""

    post: Post
    comments: list[Comment]


@dataclass(frozen=True)
class GetPostQuery(Query[PostDetails]):
    post_id: PostId


class GetPostHandler(QueryHandler[PostDetails]):
    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ):
        self._post_repository = post_repository
        self._comment_repository = comment_repository

    async def execute(self, query: GetPostQuery) -> PostDetails:
        post = await self._post_repository.get_by_id(query.post_id)
        if not post:
            raise EntityNotFoundError("Post", query.post_id.value)

        comments = await self._comment_repository.get_by_post(post.id)
        return PostDetails(post=post, comments=comments)
