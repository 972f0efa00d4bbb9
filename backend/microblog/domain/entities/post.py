"""
Post Entity - A short text message owned by the user who wrote it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from microblog.domain.exceptions import DomainValidationError
from microblog.domain.value_objects.post_id import PostId
from microblog.domain.value_objects.user_id import UserId


@dataclass
class Post:
    id: PostId
    message: str
    created_at: datetime
    updated_at: datetime
    user_id: Optional[UserId] = None

    @classmethod
    def create(cls, message: str, user_id: Optional[UserId] = None) -> Post:
        """Build a new, not yet persisted, Post with a generated ID."""
        now = datetime.now(timezone.utc)
        return cls(
            id=PostId.generate(),
            message=message,
            created_at=now,
            updated_at=now,
            user_id=user_id,
        )

    @property
    def errors(self) -> dict[str, str]:
        if not self.message or not self.message.strip():
            return {"message": "can't be blank"}
        return {}

    def is_valid(self) -> bool:
        return not self.errors

    def validate(self) -> None:
        errors = self.errors
        if errors:
            raise DomainValidationError("Post is invalid", errors)

    def is_owned_by(self, user_id: Optional[UserId]) -> bool:
        return user_id is not None and self.user_id == user_id

    def revise(self, message: str) -> Post:
        """
        Return a copy carrying the new message.

        The owner and identity are carried over untouched; the receiver is
        not modified, so a rejected revision leaves the stored post intact.
        """
        return replace(
            self, message=message, updated_at=datetime.now(timezone.utc)
        )
