"""Umami API schemas - auth and metrics."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class LoginRequestSchema(BaseModel):
    """Credentials for POST /api/auth/login."""

    username: str
    password: str


class UserSchema(BaseModel):
    """Logged-in Umami user."""

    id: str
    username: str
    role: str = ""
    created_at: datetime | None = Field(alias="createdAt", default=None)
    is_admin: bool = Field(alias="isAdmin", default=False)

    class Config:
        populate_by_name = True


class LoginSchema(BaseModel):
    """Login response: session token plus user metadata."""

    token: str
    user: UserSchema


class MetricSchema(BaseModel):
    """One row of /metrics - a path and its pageview count."""

    x: str = Field(validation_alias=AliasChoices("x", "name"))
    y: int | str = Field(validation_alias=AliasChoices("y", "pageviews"))
