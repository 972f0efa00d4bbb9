"""
DomainValidationError - A record failed its validation rules and was not saved.
Maps to: the form re-rendered with HTTP 422
"""

from typing import Optional


class DomainValidationError(Exception):
    """
    Carries one message per invalid field, e.g. {"message": "can't be blank"},
    so the form can show them next to what the user typed.
    """

    def __init__(self, message: str, errors: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}


EMAIL_TAKEN = "has already been taken"


class EmailTakenError(DomainValidationError):
    """Raised by a UserRepository when another account already has the email."""

    def __init__(self):
        super().__init__("User is invalid", {"email": EMAIL_TAKEN})
