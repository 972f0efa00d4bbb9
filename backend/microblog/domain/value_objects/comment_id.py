"""
CommentId Value Object
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class CommentId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("CommentId cannot be empty")

    @classmethod
    def generate(cls) -> "CommentId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
