"""
Dishka DI Container Setup.

- Registers repositories and command/query handlers
- Maps abstract repository ports to a concrete store
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per request)

Two providers are combined into one container:
  AppProvider            → handlers (always)
  <store provider>       → PostRepository / CommentRepository / UserRepository
                           (InMemoryStoreProvider, or PrismaStoreProvider when
                            STORE_BACKEND=prisma)

Flow:
  Container → provides → PostRepository → to → CreatePostHandler
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from microblog.application.commands.comments import CreateCommentHandler
from microblog.application.commands.posts import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from microblog.application.commands.users import (
    AuthenticateUserHandler,
    RegisterUserHandler,
)
from microblog.application.queries.posts import (
    GetEditablePostHandler,
    GetPostHandler,
    ListPostsHandler,
)
from microblog.config.settings import Config
from microblog.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from microblog.infrastructure.persistence import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)


class InMemoryStoreProvider(Provider):
    """
    Process-local store.

    Repositories are app-scoped so data survives across requests. Pass
    pre-built repositories to share them with the caller (tests seed them).
    """

    def __init__(
        self,
        posts: Optional[PostRepository] = None,
        comments: Optional[CommentRepository] = None,
        users: Optional[UserRepository] = None,
    ):
        super().__init__()
        self._posts = posts or InMemoryPostRepository()
        self._comments = comments or InMemoryCommentRepository()
        self._users = users or InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        return self._posts

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self._comments

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._users


class AppProvider(Provider):
    """Command and query handlers, one instance per request."""

    # ==================== POST HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_posts_handler(
        self, post_repository: PostRepository
    ) -> ListPostsHandler:
        return ListPostsHandler(post_repository)

    @provide(scope=Scope.REQUEST)
    def get_post_handler(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> GetPostHandler:
        return GetPostHandler(post_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_editable_post_handler(
        self, post_repository: PostRepository
    ) -> GetEditablePostHandler:
        return GetEditablePostHandler(post_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_post_handler(
        self, post_repository: PostRepository
    ) -> CreatePostHandler:
        """
        Provide CreatePostHandler.

        - Parameter asks for PostRepository (abstract)
        - Dishka resolves it from whichever store provider is installed
        """
        return CreatePostHandler(post_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_post_handler(
        self, post_repository: PostRepository
    ) -> UpdatePostHandler:
        return UpdatePostHandler(post_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_handler(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> DeletePostHandler:
        return DeletePostHandler(post_repository, comment_repository)

    # ==================== COMMENT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_comment_handler(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> CreateCommentHandler:
        return CreateCommentHandler(post_repository, comment_repository)

    # ==================== USER HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self, user_repository: UserRepository
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_authenticate_user_handler(
        self, user_repository: UserRepository
    ) -> AuthenticateUserHandler:
        return AuthenticateUserHandler(user_repository)


def build_store_provider(backend: str = Config.STORE_BACKEND) -> Provider:
    """Pick the store provider named by STORE_BACKEND."""
    if backend == "memory":
        return InMemoryStoreProvider()
    if backend == "prisma":
        # Needs a generated Prisma client, so only imported when selected
        from microblog.setup.ioc.prisma_provider import PrismaStoreProvider

        return PrismaStoreProvider()
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def create_container(store_provider: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(
        AppProvider(), store_provider or build_store_provider()
    )
