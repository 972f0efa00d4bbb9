import asyncio
import itertools
import os
import sys

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from dishka import make_async_container
from fastapi.testclient import TestClient
from werkzeug.security import generate_password_hash

from microblog.domain.entities import Comment, Post, User
from microblog.domain.value_objects import UserEmail
from microblog.fastapi_app import create_fastapi_app
from microblog.infrastructure.persistence import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from microblog.presentation.dependencies.auth import issue_session_token
from microblog.setup.ioc.container import AppProvider, InMemoryStoreProvider

PASSWORD = "correct-horse"


def run(coro):
    """Drive a repository coroutine from a synchronous test."""
    return asyncio.run(coro)


@pytest.fixture()
def post_repository():
    return InMemoryPostRepository()


@pytest.fixture()
def comment_repository():
    return InMemoryCommentRepository()


@pytest.fixture()
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture()
def app(post_repository, comment_repository, user_repository):
    """A fresh app per test, wired to the test's own in-memory stores."""
    container = make_async_container(
        AppProvider(),
        InMemoryStoreProvider(
            posts=post_repository,
            comments=comment_repository,
            users=user_repository,
        ),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client that reports redirects instead of following them."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture()
def user_factory(user_repository):
    sequence = itertools.count(1)

    def create(email=None, password=PASSWORD) -> User:
        user = User.create(
            email=UserEmail(email or f"user{next(sequence)}@example.com"),
            # Cheap hash settings keep the suite fast
            password_hash=generate_password_hash(
                password, method="pbkdf2:sha256:1000"
            ),
        )
        run(user_repository.save(user))
        return user

    return create


@pytest.fixture()
def post_factory(post_repository, user_factory):
    def create(message="My first post", user=None) -> Post:
        owner = user or user_factory()
        post = Post.create(message=message, user_id=owner.id)
        run(post_repository.save(post))
        return post

    return create


@pytest.fixture()
def comment_factory(comment_repository, user_factory):
    def create(post, message="Nice one", user=None) -> Comment:
        author = user or user_factory()
        comment = Comment.create(post_id=post.id, user_id=author.id, message=message)
        run(comment_repository.save(comment))
        return comment

    return create


@pytest.fixture()
def sign_in(client):
    """Make every following request from `client` act as `user`."""

    def _sign_in(user: User) -> None:
        client.headers["Authorization"] = f"Bearer {issue_session_token(user)}"

    return _sign_in


@pytest.fixture()
def auth_headers(user_factory):
    """Authentication headers with a valid session token for a new user."""
    user = user_factory()
    return {"Authorization": f"Bearer {issue_session_token(user)}"}
