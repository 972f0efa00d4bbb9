"""Authenticate User Command - check an email/password pair."""

from dataclasses import dataclass
from logging import getLogger

from werkzeug.security import check_password_hash

from microblog.application.common.interfaces import Command, CommandHandler
from microblog.application.dto.user import SignInForm
from microblog.domain.entities.user import User
from microblog.domain.exceptions import DomainValidationError
from microblog.domain.ports.repositories import UserRepository
from microblog.domain.value_objects.user_email import UserEmail

logger = getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


@dataclass(frozen=True)
class AuthenticateUserCommand(Command[User]):
    form: SignInForm


class AuthenticateUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: AuthenticateUserCommand) -> User:
        try:
            email = UserEmail(command.form.email)
        except ValueError:
            raise DomainValidationError(INVALID_CREDENTIALS) from None

        user = await self._user_repository.get_by_email(email)
        # Same message for unknown email and wrong password
        if not user or not check_password_hash(user.password_hash, command.form.password):
            logger.info(f"Failed sign-in attempt for {email}")
            raise DomainValidationError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} signed in")
        return user
