"""API module initialization."""

from . import auth, companies, health, jobs, metrics, users

__all__ = [
    "auth",
    "companies",
    "health",
    "jobs",
    "metrics",
    "users",
]
