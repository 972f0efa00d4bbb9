"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application needs
- Does NOT specify implementation (in-memory, Prisma)

Infrastructure layer provides implementations.
"""

from microblog.domain.ports.repositories.post_repository import PostRepository
from microblog.domain.ports.repositories.comment_repository import CommentRepository
from microblog.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "UserRepository",
]
