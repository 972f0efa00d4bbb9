"""
Base interfaces for commands (writes) and queries (reads).

A Command/Query is a frozen dataclass holding the request's inputs, the
AuthContext included. Its handler gets repositories through __init__ and
reports failures by raising domain exceptions, never by returning flags.

Usage:
    @dataclass(frozen=True)
    class DeletePostCommand(Command[bool]):
        auth: AuthContext
        post_id: PostId

    class DeletePostHandler(CommandHandler[bool]):
        async def execute(self, command: DeletePostCommand) -> bool:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Inputs for an operation that changes stored state."""


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T: ...


class Query(ABC, Generic[T]):
    """Inputs for a read."""


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T: ...
