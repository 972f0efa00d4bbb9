"""
Tests for sign up / sign in / sign out and the session token.

Run with: pytest backend/tests/test_users.py -v
"""

import pytest
from dishka import make_async_container

from conftest import PASSWORD, run
from microblog.application.commands.users import (
    RegisterUserCommand,
    RegisterUserHandler,
)
from microblog.application.dto import SignUpForm
from microblog.config.settings import DEV_SESSION_SECRET, Config
from microblog.domain.entities import User
from microblog.domain.exceptions import DomainValidationError, EmailTakenError
from microblog.domain.value_objects import UserEmail
from microblog.fastapi_app import create_fastapi_app
from microblog.infrastructure.persistence import InMemoryUserRepository
from microblog.setup.ioc.container import AppProvider, InMemoryStoreProvider
from microblog.presentation.dependencies.auth import (
    decode_session_token,
    issue_session_token,
)


def sign_up_data(email="new@example.com", password="s3cret!", confirmation=None):
    return {
        "user[email]": email,
        "user[password]": password,
        "user[password_confirmation]": password if confirmation is None else confirmation,
    }


class TestSignUp:
    def test_shows_the_form(self, client):
        response = client.get("/users/sign_up")
        assert response.status_code == 200
        assert 'name="user[email]"' in response.text

    def test_registers_and_signs_in(self, client, user_repository):
        response = client.post("/users/sign_up", data=sign_up_data())

        assert response.status_code == 302
        assert response.headers["location"] == Config.ROOT_PATH
        assert Config.SESSION_COOKIE_NAME in response.cookies
        assert run(user_repository.get_by_email(UserEmail("new@example.com")))

        # The cookie now authenticates the browser
        assert client.get("/posts/new").status_code == 200

    def test_password_is_not_stored_in_plain_text(self, client, user_repository):
        client.post("/users/sign_up", data=sign_up_data(password="s3cret!"))

        user = run(user_repository.get_by_email(UserEmail("new@example.com")))
        assert user.password_hash != "s3cret!"

    def test_rejects_invalid_input(self, client, user_repository):
        response = client.post(
            "/users/sign_up",
            data=sign_up_data(email="not-an-email", password="abc", confirmation="abd"),
        )

        assert response.status_code == 422
        assert "Email is invalid" in response.text
        assert "Password is too short" in response.text
        assert "Password confirmation doesn&#39;t match Password" in response.text
        assert Config.SESSION_COOKIE_NAME not in response.cookies

    def test_rejects_a_taken_email(self, client, user_factory):
        user_factory(email="taken@example.com")

        response = client.post(
            "/users/sign_up", data=sign_up_data(email="Taken@Example.com")
        )

        assert response.status_code == 422
        assert "Email has already been taken" in response.text

    def test_signed_in_user_is_sent_home(self, client, user_factory, sign_in):
        sign_in(user_factory())
        response = client.get("/users/sign_up")
        assert response.status_code == 302
        assert response.headers["location"] == Config.ROOT_PATH


class StaleReadUserRepository(InMemoryUserRepository):
    """Never sees existing emails, like a read racing a concurrent sign-up."""

    async def get_by_email(self, email):
        return None


class TestConcurrentSignUp:
    @pytest.fixture()
    def user_repository(self):
        return StaleReadUserRepository()

    def test_store_rejects_a_duplicate_email(self, user_repository):
        run(user_repository.save(
            User.create(email=UserEmail("dup@example.com"), password_hash="x")
        ))

        with pytest.raises(EmailTakenError):
            run(user_repository.save(
                User.create(email=UserEmail("DUP@example.com"), password_hash="y")
            ))

    def test_handler_reports_the_taken_email(self, user_repository):
        run(user_repository.save(
            User.create(email=UserEmail("dup@example.com"), password_hash="x")
        ))
        form = SignUpForm(
            email="dup@example.com", password="s3cret!", password_confirmation="s3cret!"
        )

        with pytest.raises(DomainValidationError) as exc_info:
            run(RegisterUserHandler(user_repository).execute(
                RegisterUserCommand(form=form)
            ))

        assert exc_info.value.errors == {"email": "has already been taken"}

    def test_second_sign_up_is_unprocessable(self, client):
        assert client.post(
            "/users/sign_up", data=sign_up_data(email="dup@example.com")
        ).status_code == 302
        client.cookies.clear()

        response = client.post(
            "/users/sign_up", data=sign_up_data(email="dup@example.com")
        )

        assert response.status_code == 422
        assert "Email has already been taken" in response.text


class TestSignIn:
    def test_shows_the_form(self, client):
        assert client.get(Config.SIGN_IN_PATH).status_code == 200

    def test_valid_credentials_set_the_session(self, client, user_factory):
        user_factory(email="author@example.com")

        response = client.post(
            "/users/sign_in",
            data={"user[email]": "author@example.com", "user[password]": PASSWORD},
        )

        assert response.status_code == 302
        assert response.headers["location"] == Config.ROOT_PATH
        assert client.get("/posts/new").status_code == 200

    def test_wrong_password_is_rejected(self, client, user_factory):
        user_factory(email="author@example.com")

        response = client.post(
            "/users/sign_in",
            data={"user[email]": "author@example.com", "user[password]": "nope"},
        )

        assert response.status_code == 422
        assert "Invalid email or password." in response.text
        assert client.get("/posts/new").status_code == 302

    def test_unknown_email_gets_the_same_message(self, client):
        response = client.post(
            "/users/sign_in",
            data={"user[email]": "ghost@example.com", "user[password]": PASSWORD},
        )

        assert response.status_code == 422
        assert "Invalid email or password." in response.text


class TestSignOut:
    def test_clears_the_session(self, client, user_factory):
        user_factory(email="author@example.com")
        client.post(
            "/users/sign_in",
            data={"user[email]": "author@example.com", "user[password]": PASSWORD},
        )

        response = client.post("/users/sign_out")

        assert response.status_code == 302
        assert client.get("/posts/new").status_code == 302


class TestSessionToken:
    def test_round_trips_the_user(self, user_factory):
        user = user_factory()

        auth_user = decode_session_token(issue_session_token(user))

        assert auth_user.id == user.id
        assert auth_user.email == user.email

    def test_expired_token_means_signed_out(self, client, user_factory):
        token = issue_session_token(user_factory(), ttl_seconds=-60)

        response = client.get(
            "/posts/new", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 302
        assert response.headers["location"] == Config.SIGN_IN_PATH

    def test_tampered_token_means_signed_out(self, client, user_factory):
        token = issue_session_token(user_factory())
        header, _, signature = token.split(".")
        _, other_claims, _ = issue_session_token(user_factory()).split(".")

        assert decode_session_token(f"{header}.{other_claims}.{signature}") is None
        response = client.get(
            "/posts/new", headers={"Authorization": f"Bearer {token}x"}
        )
        assert response.status_code == 302


    def test_token_for_a_user_no_longer_stored_means_signed_out(
        self, client, post_factory, comment_repository
    ):
        post = post_factory()
        ghost = User.create(email=UserEmail("ghost@example.com"), password_hash="x")

        response = client.post(
            f"/posts/{post.id}/comments",
            data={"comment[message]": "boo"},
            headers={"Authorization": f"Bearer {issue_session_token(ghost)}"},
        )

        assert response.status_code == 302
        assert response.headers["location"] == Config.SIGN_IN_PATH
        assert run(comment_repository.get_by_post(post.id)) == []


class TestApp:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_correlation_id_is_echoed(self, client):
        response = client.get("/", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_published_secret_is_refused_outside_development(self, monkeypatch):
        monkeypatch.setattr(Config, "APP_ENV", "production")
        monkeypatch.setattr(Config, "SESSION_SECRET", DEV_SESSION_SECRET)
        container = make_async_container(AppProvider(), InMemoryStoreProvider())

        with pytest.raises(RuntimeError, match="SESSION_SECRET"):
            create_fastapi_app(container)

    def test_own_secret_is_accepted_outside_development(self, monkeypatch):
        monkeypatch.setattr(Config, "APP_ENV", "production")
        monkeypatch.setattr(Config, "SESSION_SECRET", "a-deployment-secret")

        Config.validate()
