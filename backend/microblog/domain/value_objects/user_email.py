"""
UserEmail Value Object - Sign-in address, compared case-insensitively.
"""

import re
from dataclasses import dataclass

_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+$")


@dataclass(frozen=True)
class UserEmail:
    value: str

    def __post_init__(self):
        normalized = (self.value or "").strip().lower()
        if not _EMAIL.match(normalized):
            raise ValueError(f"Invalid user email: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
