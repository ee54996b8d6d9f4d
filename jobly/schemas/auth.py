"""Authentication schemas."""

from pydantic import BaseModel, Field


class Token(BaseModel):
    """Token response."""

    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Token data."""

    username: str | None = None
    is_admin: bool = False


class UserLogin(BaseModel):
    """User login request."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)
