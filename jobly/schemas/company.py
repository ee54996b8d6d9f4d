"""Company schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from jobly.schemas.base import CamelModel, CamelUpdateModel

URL_PATTERN = r"^https?://\S+$"


class CompanyCreate(CamelModel):
    """Company creation schema."""

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str = ""
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)


class CompanyUpdate(CamelUpdateModel):
    """Company update schema; the handle cannot change."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)

    @field_validator("name", "description")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class CompanyResponse(CamelModel):
    """Company response schema."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class CompanyJob(CamelModel):
    """Job as listed under its company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(CompanyResponse):
    """Company with its open jobs."""

    jobs: list[CompanyJob] = []
