"""List Posts Query."""

from dataclasses import dataclass
from microblog.application.common.interfaces import Query, QueryHandler
from microblog.domain.entities.post import Post
from microblog.domain.ports.repositories import PostRepository


@dataclass(frozen=True)
class ListPostsQuery(Query[list[Post]]):
    pass


class ListPostsHandler(QueryHandler[list[Post]]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    async def execute(self, query: ListPostsQuery) -> list[Post]:
        return await self._post_repository.list_recent()
