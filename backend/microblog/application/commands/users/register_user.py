"""
Register User Command.

Collects every problem with the sign-up form before failing, so the form can
show all of them at once.
"""

from dataclasses import dataclass
from logging import getLogger

from werkzeug.security import generate_password_hash

from microblog.application.common.interfaces import Command, CommandHandler
from microblog.application.dto.user import SignUpForm
from microblog.config.settings import Config
from microblog.domain.entities.user import User
from microblog.domain.exceptions import EMAIL_TAKEN, DomainValidationError
from microblog.domain.ports.repositories import UserRepository
from microblog.domain.value_objects.user_email import UserEmail

logger = getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command[User]):
    form: SignUpForm
    min_password_length: int = Config.MIN_PASSWORD_LENGTH


class RegisterUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: RegisterUserCommand) -> User:
        form = command.form
        errors: dict[str, str] = {}

        email = None
        try:
            email = UserEmail(form.email)
        except ValueError:
            errors["email"] = "is invalid"

        if email and await self._user_repository.get_by_email(email):
            errors["email"] = EMAIL_TAKEN

        if len(form.password) < command.min_password_length:
            errors["password"] = (
                f"is too short (minimum is {command.min_password_length} characters)"
            )
        if form.password != form.password_confirmation:
            errors["password_confirmation"] = "doesn't match Password"

        if errors:
            raise DomainValidationError("User is invalid", errors)

        user = User.create(email=email, password_hash=generate_password_hash(form.password))
        await self._user_repository.save(user)
        logger.info(f"User {user.id} registered")
        return user
