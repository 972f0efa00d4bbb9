"""
Posts Router - the post resource.

- Thin layer: reads the request, builds a Command/Query, picks an Outcome
- Handlers come from Dishka, the AuthContext from get_auth_context
- 404 / 403 / sign-in redirects are raised as domain exceptions and mapped
  once in outcomes.register_outcome_handlers; only validation failures are
  handled here, because the form to re-render depends on the action

Check order:
  new, create                → signed in?
  show                       → post exists?
  edit, update, destroy      → post exists? → signed in? → owner?

Flow:
  HTTP Request → Router → Command → Handler → Repository
                                         ↓
  HTTP Response ← respond() ← Outcome ←
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Request

from microblog.application.commands.posts import (
    CreatePostCommand,
    CreatePostHandler,
    DeletePostCommand,
    DeletePostHandler,
    UpdatePostCommand,
    UpdatePostHandler,
)
from microblog.application.common.auth_context import AuthContext
from microblog.application.dto.comment import CommentForm
from microblog.application.dto.post import PostForm
from microblog.application.queries.posts import (
    GetEditablePostHandler,
    GetEditablePostQuery,
    GetPostHandler,
    GetPostQuery,
    ListPostsHandler,
    ListPostsQuery,
)
from microblog.config.settings import Config
from microblog.domain.exceptions import DomainValidationError
from microblog.domain.value_objects.post_id import PostId
from microblog.presentation.dependencies.auth import get_auth_context
from microblog.presentation.web.outcomes import (
    HTTP_422_UNPROCESSABLE,
    Redirect,
    Render,
    respond,
)
from microblog.presentation.web.params import require_params

router = APIRouter(tags=["posts"])


@router.get("/")
@router.get("/posts")
@inject
async def index(
    request: Request,
    handler: FromDishka[ListPostsHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    """List every post, newest first."""
    posts = await handler.execute(ListPostsQuery())
    return respond(request, Render("posts/index.html", context={"posts": posts}))


@router.get("/posts/new")
async def new(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
):
    auth.require()
    return respond(
        request,
        Render("posts/new.html", context={"form": PostForm(), "errors": {}}),
    )


@router.post("/posts")
@inject
async def create(
    request: Request,
    handler: FromDishka[CreatePostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    # Signed-in check comes before the body is even read
    auth.require()
    form = PostForm.model_validate(await require_params(request, "post"))

    try:
        await handler.execute(CreatePostCommand(auth=auth, form=form))
    except DomainValidationError as e:
        return respond(
            request,
            Render(
                "posts/new.html",
                HTTP_422_UNPROCESSABLE,
                {"form": form, "errors": e.errors},
            ),
        )
    return respond(request, Redirect(Config.ROOT_PATH))


@router.get("/posts/{post_id}")
@inject
async def show(
    post_id: str,
    request: Request,
    handler: FromDishka[GetPostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    details = await handler.execute(GetPostQuery(post_id=PostId(post_id)))
    return respond(
        request,
        Render(
            "posts/show.html",
            context={
                "post": details.post,
                "comments": details.comments,
                "comment_form": CommentForm(),
                "errors": {},
            },
        ),
    )


@router.get("/posts/{post_id}/edit")
@inject
async def edit(
    post_id: str,
    request: Request,
    handler: FromDishka[GetEditablePostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    post = await handler.execute(
        GetEditablePostQuery(auth=auth, post_id=PostId(post_id))
    )
    return respond(
        request,
        Render(
            "posts/edit.html",
            context={
                "post": post,
                "form": PostForm(message=post.message),
                "errors": {},
            },
        ),
    )


@router.api_route("/posts/{post_id}", methods=["PATCH", "PUT", "POST"])
@inject
async def update(
    post_id: str,
    request: Request,
    editable: FromDishka[GetEditablePostHandler],
    handler: FromDishka[UpdatePostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    """
    Update an owned post's message.

    HTML forms cannot send PATCH, so POST to the same path is accepted too.
    """
    # Existence, sign-in and ownership are settled before the body is read
    post = await editable.execute(
        GetEditablePostQuery(auth=auth, post_id=PostId(post_id))
    )
    form = PostForm.model_validate(await require_params(request, "post"))

    try:
        await handler.execute(
            UpdatePostCommand(auth=auth, post_id=post.id, form=form)
        )
    except DomainValidationError as e:
        return respond(
            request,
            Render(
                "posts/edit.html",
                HTTP_422_UNPROCESSABLE,
                {"post": post, "form": form, "errors": e.errors},
            ),
        )
    return respond(request, Redirect(Config.ROOT_PATH))


@router.delete("/posts/{post_id}")
@router.post("/posts/{post_id}/destroy")
@inject
async def destroy(
    post_id: str,
    request: Request,
    handler: FromDishka[DeletePostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    await handler.execute(DeletePostCommand(auth=auth, post_id=PostId(post_id)))
    return respond(request, Redirect(Config.ROOT_PATH))
