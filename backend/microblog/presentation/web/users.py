"""
Users Router - sign up, sign in, sign out.

A successful sign-up or sign-in stores a signed session token in an
HttpOnly cookie; sign-out clears it. Pages meant for guests send a
signed-in user back to the root page.
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Request

from microblog.application.commands.users import (
    AuthenticateUserCommand,
    AuthenticateUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from microblog.application.common.auth_context import AuthContext
from microblog.application.dto.user import SignInForm, SignUpForm
from microblog.config.settings import Config
from microblog.domain.exceptions import DomainValidationError
from microblog.presentation.dependencies.auth import (
    clear_session_cookie,
    get_auth_context,
    set_session_cookie,
)
from microblog.presentation.web.outcomes import (
    HTTP_422_UNPROCESSABLE,
    Redirect,
    Render,
    respond,
)
from microblog.presentation.web.params import require_params

logger = getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/sign_in")
async def sign_in_form(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
):
    if auth.is_authenticated:
        return respond(request, Redirect(Config.ROOT_PATH))
    return respond(
        request,
        Render("users/sign_in.html", context={"form": SignInForm(), "error": None}),
    )


@router.post("/sign_in")
@inject
async def sign_in(
    request: Request,
    handler: FromDishka[AuthenticateUserHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    if auth.is_authenticated:
        return respond(request, Redirect(Config.ROOT_PATH))

    form = SignInForm.model_validate(await require_params(request, "user"))
    try:
        user = await handler.execute(AuthenticateUserCommand(form=form))
    except DomainValidationError as e:
        return respond(
            request,
            Render(
                "users/sign_in.html",
                HTTP_422_UNPROCESSABLE,
                {"form": SignInForm(email=form.email), "error": e.message},
            ),
        )

    response = respond(request, Redirect(Config.ROOT_PATH))
    set_session_cookie(response, user)
    return response


@router.get("/sign_up")
async def sign_up_form(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
):
    if auth.is_authenticated:
        return respond(request, Redirect(Config.ROOT_PATH))
    return respond(
        request,
        Render("users/sign_up.html", context={"form": SignUpForm(), "errors": {}}),
    )


@router.post("/sign_up")
@inject
async def sign_up(
    request: Request,
    handler: FromDishka[RegisterUserHandler],
    auth: AuthContext = Depends(get_auth_context),
):
    if auth.is_authenticated:
        return respond(request, Redirect(Config.ROOT_PATH))

    form = SignUpForm.model_validate(await require_params(request, "user"))
    try:
        user = await handler.execute(RegisterUserCommand(form=form))
    except DomainValidationError as e:
        return respond(
            request,
            Render(
                "users/sign_up.html",
                HTTP_422_UNPROCESSABLE,
                # Passwords are never echoed back
                {"form": SignUpForm(email=form.email), "errors": e.errors},
            ),
        )

    response = respond(request, Redirect(Config.ROOT_PATH))
    set_session_cookie(response, user)
    return response


@router.api_route("/sign_out", methods=["POST", "DELETE"])
async def sign_out(
    request: Request,
    auth: AuthContext = Depends(get_auth_context),
):
    if auth.user:
        logger.info(f"User {auth.user.id} signed out")
    response = respond(request, Redirect(Config.ROOT_PATH))
    clear_session_cookie(response)
    return response
