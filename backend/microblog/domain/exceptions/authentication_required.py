"""
AuthenticationRequiredError - Raised when an action needs a signed-in user.
Maps to: redirect to the sign-in page
"""


class AuthenticationRequiredError(Exception):
    """Raised when no user is signed in for an action that requires one."""

    def __init__(self, message: str = "You need to sign in before continuing."):
        super().__init__(message)
