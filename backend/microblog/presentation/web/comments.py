"""
Comments Router - comments are created through their parent post.

Check order: signed in? → post exists? → comment valid?
"""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Request

from microblog.application.commands.comments import (
    CreateCommentCommand,
    CreateCommentHandler,
)
from microblog.application.common.auth_context import AuthContext
from microblog.application.dto.comment import CommentForm
from microblog.application.queries.posts import GetPostHandler, GetPostQuery
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

router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])


@router.post("")
@inject
async def create(
    post_id: str,
    request: Request,
    handler: FromDishka[CreateCommentHandler],
    post_handler: FromDishka[GetPostHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    auth.require()
    form = CommentForm.model_validate(await require_params(request, "comment"))

    try:
        await handler.execute(
            CreateCommentCommand(auth=auth, post_id=PostId(post_id), form=form)
        )
    except DomainValidationError as e:
        details = await post_handler.execute(GetPostQuery(post_id=PostId(post_id)))
        return respond(
            request,
            Render(
                "posts/show.html",
                HTTP_422_UNPROCESSABLE,
                {
                    "post": details.post,
                    "comments": details.comments,
                    "comment_form": form,
                    "errors": e.errors,
                },
            ),
        )
    return respond(request, Redirect(Config.ROOT_PATH))
