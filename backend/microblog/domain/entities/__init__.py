"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from microblog.domain.entities.post import Post
from microblog.domain.entities.comment import Comment
from microblog.domain.entities.user import User

__all__ = [
    "Post",
    "Comment",
    "User",
]
