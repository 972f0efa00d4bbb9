"""Post commands."""

from .create_post import CreatePostCommand, CreatePostHandler
from .delete_post import DeletePostCommand, DeletePostHandler
from .update_post import UpdatePostCommand, UpdatePostHandler

__all__ = [
    "CreatePostCommand",
    "CreatePostHandler",
    "DeletePostCommand",
    "DeletePostHandler",
    "UpdatePostCommand",
    "UpdatePostHandler",
]
