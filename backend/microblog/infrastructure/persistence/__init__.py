"""
Persistence Layer - Repository implementations.

The in-memory repositories are always importable. The Prisma repositories
need a generated Prisma client and are imported only when
STORE_BACKEND=prisma (see microblog.setup.ioc.prisma_provider).
"""

from microblog.infrastructure.persistence.memory_post_repository import (
    InMemoryPostRepository,
)
from microblog.infrastructure.persistence.memory_comment_repository import (
    InMemoryCommentRepository,
)
from microblog.infrastructure.persistence.memory_user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryPostRepository",
    "InMemoryCommentRepository",
    "InMemoryUserRepository",
]
