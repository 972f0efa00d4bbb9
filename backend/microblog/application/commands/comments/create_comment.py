"""
Create Comment Command.

The signed-in check runs first; only then is the parent post resolved.
"""

from dataclasses import dataclass
from logging import getLogger

from microblog.application.common.auth_context import AuthContext
from microblog.application.common.interfaces import Command, CommandHandler
from microblog.application.dto.comment import CommentForm
from microblog.domain.entities.comment import Comment
from microblog.domain.exceptions import EntityNotFoundError
from microblog.domain.ports.repositories import CommentRepository, PostRepository
from microblog.domain.value_objects.post_id import PostId

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateCommentCommand(Command[Comment]):
    auth: AuthContext
    post_id: PostId
    form: CommentForm


class CreateCommentHandler(CommandHandler[Comment]):
    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ):
        self._post_repository = post_repository
        self._comment_repository = comment_repository

    async def execute(self, command: CreateCommentCommand) -> Comment:
        user = command.auth.require()

        post = await self._post_repository.get_by_id(command.post_id)
        if not post:
            raise EntityNotFoundError("Post", command.post_id.value)

        comment = Comment.create(
            post_id=post.id, user_id=user.id, message=command.form.message
        )
        comment.validate()

        await self._comment_repository.save(comment)
        logger.info(f"Comment {comment.id} added to post {post.id} by {user.id}")
        return comment
