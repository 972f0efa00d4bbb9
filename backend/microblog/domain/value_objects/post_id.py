"""
PostId Value Object - Opaque post identity.

Any non-empty string is a well-formed id; whether it resolves to a post is
for the repository to answer.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class PostId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("PostId cannot be empty")

    @classmethod
    def generate(cls) -> "PostId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
