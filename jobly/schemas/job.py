"""Job schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from jobly.schemas.base import CamelModel, CamelUpdateModel


class JobCreate(CamelModel):
    """Job creation schema."""

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(CamelUpdateModel):
    """Job update schema; id and company cannot change. Null clears salary or equity."""

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class JobResponse(CamelModel):
    """Job response schema."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str

    model_config = ConfigDict(from_attributes=True)
