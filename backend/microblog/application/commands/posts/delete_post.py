"""Delete Post Command."""

from dataclasses import dataclass
from logging import getLogger

from microblog.application.common.auth_context import AuthContext
from microblog.application.common.interfaces import Command, CommandHandler
from microblog.domain.exceptions import AccessDeniedError, EntityNotFoundError
from microblog.domain.ports.repositories import CommentRepository, PostRepository
from microblog.domain.value_objects.post_id import PostId

logger = getLogger(__name__)


@dataclass(frozen=True)
class DeletePostCommand(Command[bool]):
    auth: AuthContext
    post_id: PostId


class DeletePostHandler(CommandHandler[bool]):
    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ):
        self._post_repository = post_repository
        self._comment_repository = comment_repository

    async def execute(self, command: DeletePostCommand) -> bool:
        post_id = command.post_id

        post = await self._post_repository.get_by_id(post_id)
        if not post:
            raise EntityNotFoundError("Post", post_id.value)

        user = command.auth.require()
        if not post.is_owned_by(user.id):
            logger.warning(f"User {user.id} tried to delete post {post_id}")
            raise AccessDeniedError("delete", f"post {post_id}")

        removed = await self._comment_repository.delete_by_post(post_id)
        deleted = await self._post_repository.delete(post_id)
        logger.info(
            f"Post {post_id} deleted by user {user.id} ({removed} comments removed)"
        )
        return deleted
