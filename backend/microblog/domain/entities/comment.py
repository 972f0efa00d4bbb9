"""
Comment Entity - A reply left by a user on a post.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from microblog.domain.exceptions import DomainValidationError
from microblog.domain.value_objects.comment_id import CommentId
from microblog.domain.value_objects.post_id import PostId
from microblog.domain.value_objects.user_id import UserId


@dataclass
class Comment:
    id: CommentId
    post_id: PostId
    user_id: UserId
    message: str
    created_at: datetime

    @classmethod
    def create(cls, post_id: PostId, user_id: UserId, message: str) -> Comment:
        return cls(
            id=CommentId.generate(),
            post_id=post_id,
            user_id=user_id,
            message=message,
            created_at=datetime.now(timezone.utc),
        )

    def validate(self) -> None:
        if not self.message or not self.message.strip():
            raise DomainValidationError(
                "Comment is invalid", {"message": "can't be blank"}
            )
