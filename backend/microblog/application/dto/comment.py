"""Comment form DTO."""

from pydantic import BaseModel, ConfigDict


class CommentForm(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str = ""
