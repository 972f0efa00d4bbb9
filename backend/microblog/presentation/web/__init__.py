"""
Web Routers - FastAPI endpoint definitions.
"""

from microblog.presentation.web.posts import router as posts_router
from microblog.presentation.web.comments import router as comments_router
from microblog.presentation.web.users import router as users_router

__all__ = [
    "posts_router",
    "comments_router",
    "users_router",
]
