"""Post-related queries."""

from microblog.application.queries.posts.list_posts import (
    ListPostsQuery,
    ListPostsHandler,
)
from microblog.application.queries.posts.get_post import (
    GetPostQuery,
    GetPostHandler,
    PostDetails,
)
from microblog.application.queries.posts.get_editable_post import (
    GetEditablePostQuery,
    GetEditablePostHandler,
)

__all__ = [
    "ListPostsQuery",
    "ListPostsHandler",
    "GetPostQuery",
    "GetPostHandler",
    "PostDetails",
    "GetEditablePostQuery",
    "GetEditablePostHandler",
]
