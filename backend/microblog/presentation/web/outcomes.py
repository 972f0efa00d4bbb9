"""
Outcomes - What a route decided, before it becomes an HTTP response.

Every route ends in exactly one Outcome:
- Redirect(location)               → 302 to another page
- Render(view, status, context)    → a Jinja2 template with a status code
- PlainStatus(status, message)     → a bare text body (404, 403, 400, ...)

Routes only choose the Outcome; ``respond`` is the one place that turns it
into a response. Domain exceptions that every route treats the same way are
mapped here too (see ``register_outcome_handlers``).
"""

from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Union

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from microblog.application.common.auth_context import AuthContext
from microblog.config.settings import Config
from microblog.domain.exceptions import (
    AccessDeniedError,
    AuthenticationRequiredError,
    EntityNotFoundError,
)
from microblog.presentation.web.params import ParameterMissingError

logger = getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found :("
FORBIDDEN_MESSAGE = "Forbidden :("

# Starlette's name for this constant differs between releases
HTTP_422_UNPROCESSABLE = 422

templates = Jinja2Templates(directory=Config.TEMPLATE_DIR)


@dataclass(frozen=True)
class Redirect:
    location: str
    status_code: int = status.HTTP_302_FOUND


@dataclass(frozen=True)
class Render:
    view: str
    status_code: int = status.HTTP_200_OK
    context: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PlainStatus:
    status_code: int
    message: str


Outcome = Union[Redirect, Render, PlainStatus]


def not_found() -> PlainStatus:
    return PlainStatus(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


def forbidden() -> PlainStatus:
    return PlainStatus(status.HTTP_403_FORBIDDEN, FORBIDDEN_MESSAGE)


def sign_in_required() -> Redirect:
    return Redirect(Config.SIGN_IN_PATH)


def respond(request: Request, outcome: Outcome) -> Response:
    """Turn an Outcome into the HTTP response."""
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.location, status_code=outcome.status_code)

    if isinstance(outcome, Render):
        context = dict(outcome.context)
        context.setdefault(
            "auth", getattr(request.state, "auth", AuthContext.anonymous())
        )
        return templates.TemplateResponse(
            request, outcome.view, context, status_code=outcome.status_code
        )

    if isinstance(outcome, PlainStatus):
        return PlainTextResponse(outcome.message, status_code=outcome.status_code)

    raise TypeError(f"Not an outcome: {outcome!r}")


def register_outcome_handlers(app: FastAPI) -> None:
    """Map domain exceptions that mean the same thing on every route."""

    @app.exception_handler(AuthenticationRequiredError)
    async def authentication_required_handler(
        request: Request, exc: AuthenticationRequiredError
    ):
        return respond(request, sign_in_required())

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return respond(request, not_found())

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return respond(request, forbidden())

    @app.exception_handler(ParameterMissingError)
    async def parameter_missing_handler(
        request: Request, exc: ParameterMissingError
    ):
        return respond(request, PlainStatus(status.HTTP_400_BAD_REQUEST, str(exc)))
