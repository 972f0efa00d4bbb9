"""
Authentication Dependency for FastAPI.

- Reads a JWT from the Authorization header (Bearer scheme) or, for
  browsers, from the session cookie
- Looks the token's user up in the UserRepository
- Builds the AuthContext handed to every command/query
- Never rejects a request: a token that cannot be verified just means
  nobody is signed in; handlers decide whether that matters

Config needed (from microblog.config.settings):
- SESSION_SECRET
- SERVICE_AUTH_ISSUER
- SERVICE_AUTH_AUDIENCE
- SESSION_TTL_SECONDS, SESSION_COOKIE_NAME, SESSION_COOKIE_SECURE
"""

import time
from logging import getLogger
from typing import Optional

import jwt
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from microblog.application.common.auth_context import AuthContext, AuthUser
from microblog.config.settings import Config
from microblog.domain.entities.user import User
from microblog.domain.ports.repositories import UserRepository
from microblog.domain.value_objects.user_email import UserEmail
from microblog.domain.value_objects.user_id import UserId

logger = getLogger(__name__)

security = HTTPBearer(auto_error=False)


def issue_session_token(user: User, ttl_seconds: Optional[int] = None) -> str:
    """Sign a session token for the given user."""
    now = int(time.time())
    ttl = Config.SESSION_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    return jwt.encode(
        {
            "sub": user.id.value,
            "email": user.email.value,
            "iat": now,
            "exp": now + ttl,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        Config.SESSION_SECRET,
        algorithm="HS256",
    )


def decode_session_token(token: str) -> Optional[AuthUser]:
    """Return the signed-in user a token names, or None if it is unusable."""
    try:
        claims = jwt.decode(
            token,
            Config.SESSION_SECRET,
            algorithms=["HS256"],
            audience=Config.SERVICE_AUTH_AUDIENCE,
            issuer=Config.SERVICE_AUTH_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        logger.debug("Session token has expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.debug(f"Invalid session token: {e}")
        return None

    try:
        return AuthUser(
            id=UserId(claims["sub"]),
            email=UserEmail(claims.get("email", "")),
        )
    except ValueError as e:
        logger.debug(f"Session token has malformed claims: {e}")
        return None


@inject
async def get_auth_context(
    request: Request,
    user_repository: FromDishka[UserRepository],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthContext:
    """
    Resolve the current user, if any.

    A correctly signed token whose user is no longer stored (the store was
    reset while the cookie lived on) counts as signed out.

    The context is also stored on request.state so views can show who is
    signed in.
    """
    token = credentials.credentials if credentials else None
    if not token:
        token = request.cookies.get(Config.SESSION_COOKIE_NAME)

    user = decode_session_token(token) if token else None
    if user:
        stored = await user_repository.get_by_id(user.id)
        if stored:
            user = AuthUser(id=stored.id, email=stored.email)
        else:
            logger.debug(f"Session token names unknown user {user.id}")
            user = None

    context = AuthContext(user=user)
    request.state.auth = context
    return context


def set_session_cookie(response: Response, user: User) -> None:
    response.set_cookie(
        Config.SESSION_COOKIE_NAME,
        issue_session_token(user),
        max_age=Config.SESSION_TTL_SECONDS,
        httponly=True,
        secure=Config.SESSION_COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(Config.SESSION_COOKIE_NAME, path="/")
