"""
Create Post Command.

- Requires a signed-in user before the store is touched
- The new post is owned by that user
- Only the permitted form fields reach the entity
- An invalid post is never saved
"""

from dataclasses import dataclass
from logging import getLogger

from microblog.application.common.auth_context import AuthContext
from microblog.application.common.interfaces import Command, CommandHandler
from microblog.application.dto.post import PostForm
from microblog.domain.entities.post import Post
from microblog.domain.ports.repositories import PostRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreatePostCommand(Command[Post]):
    auth: AuthContext
    form: PostForm


class CreatePostHandler(CommandHandler[Post]):
    _post_repository: PostRepository

    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    async def execute(self, command: CreatePostCommand) -> Post:
        user = command.auth.require()

        post = Post.create(message=command.form.message, user_id=user.id)
        post.validate()

        await self._post_repository.save(post)
        logger.info(f"Post {post.id} created by user {user.id}")
        return post
