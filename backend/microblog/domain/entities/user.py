"""
User Entity - A registered author.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from microblog.domain.value_objects.user_id import UserId
from microblog.domain.value_objects.user_email import UserEmail


@dataclass
class User:
    id: UserId
    email: UserEmail
    password_hash: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, email: UserEmail, password_hash: str) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId.generate(),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
