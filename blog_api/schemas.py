from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    """Wire records use camelCase names; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- User ---

class UserCreate(CamelModel):
    username: NonBlankStr = Field(max_length=100)
    email: NonBlankStr = Field(max_length=255)
    password: NonBlankStr


class UserResponse(CamelModel):
    # No password field: the hash never leaves the service layer.
    id: int
    username: str
    email: str


class PasswordChange(CamelModel):
    username: NonBlankStr
    old_password: NonBlankStr
    new_password: NonBlankStr = Field(min_length=6)


# --- Post ---

class PostCreate(CamelModel):
    title: NonBlankStr = Field(min_length=3, max_length=100)
    content: NonBlankStr
    user_id: int


class PostUpdate(CamelModel):
    title: NonBlankStr = Field(max_length=100)
    content: NonBlankStr
    # Optional on update; when present it must still resolve to a user.
    user_id: int | None = None


class PostResponse(CamelModel):
    id: int
    title: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user_id: int
    username: str
