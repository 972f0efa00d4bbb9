"""
UserId Value Object - UUID string identifying an account.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        try:
            UUID(self.value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid user id: {self.value!r}") from None

    @classmethod
    def generate(cls) -> "UserId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
