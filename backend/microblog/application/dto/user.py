"""Sign-in / sign-up form DTOs."""

from pydantic import BaseModel, ConfigDict


class SignInForm(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    email: str = ""
    password: str = ""


class SignUpForm(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    email: str = ""
    password: str = ""
    password_confirmation: str = ""
