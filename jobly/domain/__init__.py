"""Domain layer primitives."""

from . import exceptions

__all__ = ["exceptions"]
