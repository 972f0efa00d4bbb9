"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by application handlers and caught by the
presentation layer, which maps them to HTTP outcomes.
"""

from microblog.domain.exceptions.entity_not_found import EntityNotFoundError
from microblog.domain.exceptions.access_denied import AccessDeniedError
from microblog.domain.exceptions.authentication_required import (
    AuthenticationRequiredError,
)
from microblog.domain.exceptions.validation_error import (
    EMAIL_TAKEN,
    DomainValidationError,
    EmailTakenError,
)

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationRequiredError",
    "DomainValidationError",
    "EmailTakenError",
    "EMAIL_TAKEN",
]
