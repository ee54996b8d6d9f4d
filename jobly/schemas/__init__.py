"""Schemas module initialization."""

from .auth import Token, TokenData, UserLogin
from .company import CompanyCreate, CompanyDetail, CompanyResponse, CompanyUpdate
from .job import JobCreate, JobResponse, JobUpdate
from .user import AdminUserCreate, UserCreate, UserDetail, UserResponse, UserUpdate

__all__ = [
    "Token",
    "TokenData",
    "UserLogin",
    "CompanyCreate",
    "CompanyDetail",
    "CompanyResponse",
    "CompanyUpdate",
    "JobCreate",
    "JobResponse",
    "JobUpdate",
    "AdminUserCreate",
    "UserCreate",
    "UserDetail",
    "UserResponse",
    "UserUpdate",
]
