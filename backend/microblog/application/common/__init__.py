from microblog.application.common.auth_context import AuthContext, AuthUser
from microblog.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)

__all__ = [
    "AuthContext",
    "AuthUser",
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
]
