"""Post form DTO."""

from pydantic import BaseModel, ConfigDict


class PostForm(BaseModel):
    """Permitted fields for creating or updating a post."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str = ""
