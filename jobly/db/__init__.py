"""Database module initialization."""

from .models import Base, Company, Job, User, applications
from .session import SessionLocal, engine, get_db
from .utils import seed_default_data

__all__ = [
    "Base",
    "Company",
    "Job",
    "User",
    "applications",
    "get_db",
    "engine",
    "SessionLocal",
    "seed_default_data",
]
