"""Core module initialization."""

from .config import settings
from .logging import get_logger, setup_logging

__all__ = ["settings", "get_logger", "setup_logging"]
