"""User schemas."""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from jobly.schemas.base import CamelModel, CamelUpdateModel

USERNAME_PATTERN = r"^[a-zA-Z0-9_\-]+$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(CamelModel):
    """Self-registration request; never grants admin."""

    username: str = Field(..., min_length=1, max_length=25, pattern=USERNAME_PATTERN)
    password: str = Field(..., min_length=5, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=EMAIL_PATTERN)


class AdminUserCreate(UserCreate):
    """Admin-issued user creation; may grant admin."""

    is_admin: bool = False


class UserUpdate(CamelUpdateModel):
    """Partial user update. Only admins may change ``isAdmin``."""

    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[str] = Field(None, min_length=6, max_length=60, pattern=EMAIL_PATTERN)
    is_admin: Optional[bool] = None

    @field_validator("password", "first_name", "last_name", "email", "is_admin")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class UserResponse(CamelModel):
    """User response schema."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool

    model_config = ConfigDict(from_attributes=True)


class UserDetail(UserResponse):
    """User with the ids of jobs applied to."""

    jobs: list[int] = []

    @classmethod
    def from_user(cls, user) -> "UserDetail":
        base = UserResponse.model_validate(user).model_dump()
        return cls(**base, jobs=[job.id for job in user.applied_jobs])
