"""
AuthContext - Who (if anyone) is making the current request.

Built once per request by the presentation layer and handed to every
command/query, instead of handlers reaching for an ambient "current user".
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from microblog.domain.exceptions import AuthenticationRequiredError
from microblog.domain.value_objects.user_email import UserEmail
from microblog.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AuthUser:
    id: UserId
    email: UserEmail


@dataclass(frozen=True)
class AuthContext:
    user: Optional[AuthUser] = None

    @classmethod
    def anonymous(cls) -> AuthContext:
        return cls(user=None)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> Optional[UserId]:
        return self.user.id if self.user else None

    def require(self) -> AuthUser:
        """Return the signed-in user or raise AuthenticationRequiredError."""
        if self.user is None:
            raise AuthenticationRequiredError()
        return self.user
