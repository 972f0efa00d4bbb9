"""GetEditablePost Query - Load a post for its owner's edit form."""

from dataclasses import dataclass
from logging import getLogger

from microblog.application.common.auth_context import AuthContext
from microblog.application.common.interfaces import Query, QueryHandler
from microblog.domain.entities.post import Post
from microblog.domain.exceptions import AccessDeniedError, EntityNotFoundError
from microblog.domain.ports.repositories import PostRepository
from microblog.domain.value_objects.post_id import PostId

logger = getLogger(__name__)


@dataclass(frozen=True)
class GetEditablePostQuery(Query[Post]):
    auth: AuthContext
    post_id: PostId


class GetEditablePostHandler(QueryHandler[Post]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    async def execute(self, query: GetEditablePostQuery) -> Post:
        """
        Raises:
            EntityNotFoundError: If the post doesn't exist
            AuthenticationRequiredError: If nobody is signed in
            AccessDeniedError: If the user doesn't own the post
        """
        post = await self._post_repository.get_by_id(query.post_id)
        if not post:
            raise EntityNotFoundError("Post", query.post_id.value)

        user = query.auth.require()
        if not post.is_owned_by(user.id):
            logger.warning(f"User {user.id} tried to edit post {post.id}")
            raise AccessDeniedError("edit", f"post {post.id}")

        return post
