"""Update Post Command."""

from dataclasses import dataclass
from logging import getLogger

from microblog.application.common.auth_context import AuthContext
from microblog.application.common.interfaces import Command, CommandHandler
from microblog.application.dto.post import PostForm
from microblog.domain.entities.post import Post
from microblog.domain.exceptions import AccessDeniedError, EntityNotFoundError
from microblog.domain.ports.repositories import PostRepository
from microblog.domain.value_objects.post_id import PostId

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdatePostCommand(Command[Post]):
    auth: AuthContext
    post_id: PostId
    form: PostForm


class UpdatePostHandler(CommandHandler[Post]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    async def execute(self, command: UpdatePostCommand) -> Post:
        """
        Apply the permitted fields to an owned post.

        Steps:
        1. Resolve the post
        2. Require a signed-in user
        3. Verify the user owns the post
        4. Validate a revised copy, save it only if valid

        Raises:
            EntityNotFoundError: If the post doesn't exist
            AuthenticationRequiredError: If nobody is signed in
            AccessDeniedError: If the user doesn't own the post
            DomainValidationError: If the revised post is invalid
        """
        post = await self._post_repository.get_by_id(command.post_id)
        if not post:
            raise EntityNotFoundError("Post", command.post_id.value)

        user = command.auth.require()
        if not post.is_owned_by(user.id):
            logger.warning(f"User {user.id} tried to update post {post.id}")
            raise AccessDeniedError("update", f"post {post.id}")

        revised = post.revise(command.form.message)
        revised.validate()

        await self._post_repository.save(revised)
        logger.info(f"Post {revised.id} updated by user {user.id}")
        return revised
