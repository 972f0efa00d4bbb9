"""
Tests for the post resource routes.

Run with: pytest backend/tests/test_posts.py -v
"""

from conftest import run
from microblog.config.settings import Config
from microblog.domain.entities import User
from microblog.domain.value_objects import PostId, UserEmail


def assert_redirects_to(response, location):
    assert response.status_code == 302
    assert response.headers["location"] == location


class TestIndex:
    def test_index_shows_the_page(self, client):
        response = client.get("/posts")
        assert response.status_code == 200

    def test_root_lists_posts_newest_first(self, client, post_factory):
        post_factory(message="older post")
        post_factory(message="newer post")

        response = client.get("/")

        assert response.status_code == 200
        assert response.text.index("newer post") < response.text.index("older post")


class TestNew:
    def test_requires_sign_in(self, client):
        response = client.get("/posts/new")
        assert_redirects_to(response, Config.SIGN_IN_PATH)

    def test_shows_the_form_to_a_signed_in_user(self, client, user_factory, sign_in):
        sign_in(user_factory())
        response = client.get("/posts/new")
        assert response.status_code == 200
        assert 'name="post[message]"' in response.text


class TestCreate:
    def test_requires_sign_in(self, client, post_repository):
        response = client.post("/posts", data={"post[message]": "Hello!"})

        assert_redirects_to(response, Config.SIGN_IN_PATH)
        assert run(post_repository.count()) == 0

    def test_token_for_a_user_no_longer_stored_requires_sign_in(
        self, client, sign_in, post_repository
    ):
        sign_in(User.create(email=UserEmail("gone@example.com"), password_hash="x"))

        response = client.post("/posts", data={"post[message]": "from nobody"})

        assert_redirects_to(response, Config.SIGN_IN_PATH)
        assert run(post_repository.count()) == 0

    def test_creates_a_post_owned_by_the_current_user(
        self, client, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        sign_in(user)

        response = client.post("/posts", data={"post[message]": "Hello!"})

        assert_redirects_to(response, Config.ROOT_PATH)
        post = run(post_repository.list_recent())[0]
        assert post.message == "Hello!"
        assert post.user_id == user.id

    def test_blank_message_is_unprocessable_and_not_saved(
        self, client, user_factory, sign_in, post_repository
    ):
        sign_in(user_factory())

        response = client.post("/posts", data={"post[message]": ""})

        assert response.status_code == 422
        assert run(post_repository.count()) == 0

    def test_whitespace_only_message_is_rejected(
        self, client, user_factory, sign_in, post_repository
    ):
        sign_in(user_factory())

        response = client.post("/posts", data={"post[message]": "   "})

        assert response.status_code == 422
        assert "can&#39;t be blank" in response.text
        assert run(post_repository.count()) == 0

    def test_submitted_owner_is_ignored(
        self, client, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        someone_else = user_factory()
        sign_in(user)

        client.post(
            "/posts",
            data={
                "post[message]": "Mine",
                "post[user_id]": someone_else.id.value,
                "post[id]": "CHOSEN",
            },
        )

        post = run(post_repository.list_recent())[0]
        assert post.user_id == user.id
        assert post.id.value != "CHOSEN"

    def test_missing_post_param_is_a_bad_request(self, client, user_factory, sign_in):
        sign_in(user_factory())

        response = client.post("/posts", data={"message": "not nested"})

        assert response.status_code == 400
        assert "post" in response.text

    def test_accepts_json_with_bearer_token(
        self, client, auth_headers, post_repository
    ):
        response = client.post(
            "/posts", json={"post": {"message": "From an API"}}, headers=auth_headers
        )

        assert_redirects_to(response, Config.ROOT_PATH)
        assert run(post_repository.list_recent())[0].message == "From an API"


class TestShow:
    def test_shows_an_existing_post(self, client, post_factory):
        post = post_factory(message="Look at me")

        response = client.get(f"/posts/{post.id}")

        assert response.status_code == 200
        assert "Look at me" in response.text

    def test_unknown_post_is_not_found(self, client):
        response = client.get("/posts/TACOCAT")

        assert response.status_code == 404
        assert response.text == "Not Found :("

    def test_lists_the_post_comments(self, client, post_factory, comment_factory):
        post = post_factory()
        comment_factory(post, message="first!")

        response = client.get(f"/posts/{post.id}")

        assert "first!" in response.text


class TestEdit:
    def test_owner_sees_the_form(self, client, post_factory, user_factory, sign_in):
        user = user_factory()
        post = post_factory(message="Draft", user=user)
        sign_in(user)

        response = client.get(f"/posts/{post.id}/edit")

        assert response.status_code == 200
        assert "Draft" in response.text

    def test_unknown_post_is_not_found(self, client, user_factory, sign_in):
        sign_in(user_factory())
        response = client.get("/posts/SWAG/edit")
        assert response.status_code == 404

    def test_unknown_post_is_not_found_when_signed_out(self, client):
        response = client.get("/posts/SWAG/edit")
        assert response.status_code == 404

    def test_requires_sign_in(self, client, post_factory):
        post = post_factory()
        response = client.get(f"/posts/{post.id}/edit")
        assert_redirects_to(response, Config.SIGN_IN_PATH)

    def test_other_users_are_forbidden(
        self, client, post_factory, user_factory, sign_in
    ):
        post = post_factory()
        sign_in(user_factory())

        response = client.get(f"/posts/{post.id}/edit")

        assert response.status_code == 403
        assert response.text == "Forbidden :("


class TestUpdate:
    def test_owner_can_change_the_message(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        post = post_factory(message="Initial Value", user=user)
        sign_in(user)

        response = client.patch(
            f"/posts/{post.id}", data={"post[message]": "Changed"}
        )

        assert_redirects_to(response, Config.ROOT_PATH)
        stored = run(post_repository.get_by_id(post.id))
        assert stored.message == "Changed"
        assert stored.user_id == user.id
        assert stored.created_at == post.created_at

    def test_html_form_post_also_updates(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        post = post_factory(user=user)
        sign_in(user)

        response = client.post(f"/posts/{post.id}", data={"post[message]": "Via form"})

        assert_redirects_to(response, Config.ROOT_PATH)
        assert run(post_repository.get_by_id(post.id)).message == "Via form"

    def test_blank_message_is_unprocessable_and_keeps_stored_message(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        post = post_factory(message="Initial Value", user=user)
        sign_in(user)

        response = client.patch(f"/posts/{post.id}", data={"post[message]": ""})

        assert response.status_code == 422
        assert run(post_repository.get_by_id(post.id)).message == "Initial Value"

    def test_unknown_post_is_not_found(self, client, user_factory, sign_in):
        sign_in(user_factory())
        response = client.patch("/posts/YOLOSWAG", data={"post[message]": "Changed"})
        assert response.status_code == 404

    def test_unknown_post_is_not_found_when_signed_out(self, client):
        response = client.patch("/posts/YOLOSWAG", data={"post[message]": "Changed"})
        assert response.status_code == 404

    def test_requires_sign_in(self, client, post_factory, post_repository):
        post = post_factory(message="Initial Value")

        response = client.patch(f"/posts/{post.id}", data={"post[message]": "Hacked"})

        assert_redirects_to(response, Config.SIGN_IN_PATH)
        assert run(post_repository.get_by_id(post.id)).message == "Initial Value"

    def test_other_users_are_forbidden(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        post = post_factory(message="Initial Value")
        sign_in(user_factory())

        response = client.patch(f"/posts/{post.id}", data={"post[message]": "Hacked"})

        assert response.status_code == 403
        assert run(post_repository.get_by_id(post.id)).message == "Initial Value"

    def test_submitted_owner_is_ignored(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        thief = user_factory()
        post = post_factory(user=user)
        sign_in(user)

        client.patch(
            f"/posts/{post.id}",
            data={"post[message]": "Still mine", "post[user_id]": thief.id.value},
        )

        assert run(post_repository.get_by_id(post.id)).user_id == user.id


class TestDestroy:
    def test_owner_can_destroy(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        user = user_factory()
        post = post_factory(user=user)
        sign_in(user)

        response = client.delete(f"/posts/{post.id}")

        assert_redirects_to(response, Config.ROOT_PATH)
        assert run(post_repository.get_by_id(post.id)) is None

    def test_destroy_removes_the_post_comments(
        self,
        client,
        post_factory,
        comment_factory,
        user_factory,
        sign_in,
        comment_repository,
    ):
        user = user_factory()
        post = post_factory(user=user)
        comment_factory(post)
        sign_in(user)

        client.post(f"/posts/{post.id}/destroy")

        assert run(comment_repository.get_by_post(post.id)) == []

    def test_other_users_are_forbidden(
        self, client, post_factory, user_factory, sign_in, post_repository
    ):
        post = post_factory()
        sign_in(user_factory())

        response = client.delete(f"/posts/{post.id}")

        assert response.status_code == 403
        assert run(post_repository.get_by_id(post.id)) == post

    def test_requires_sign_in(self, client, post_factory, post_repository):
        post = post_factory()

        response = client.delete(f"/posts/{post.id}")

        assert_redirects_to(response, Config.SIGN_IN_PATH)
        assert run(post_repository.get_by_id(post.id)) is not None

    def test_unknown_post_is_not_found(self, client, user_factory, sign_in):
        sign_in(user_factory())
        response = client.delete("/posts/SPACEDUCK")
        assert response.status_code == 404

    def test_unknown_post_is_not_found_when_signed_out(self, client):
        response = client.delete(f"/posts/{PostId.generate()}")
        assert response.status_code == 404
