"""Aesthetic catalog collaborators."""

from .base import AestheticCatalog
from .memory import InMemoryAestheticCatalog

__all__ = ["AestheticCatalog", "InMemoryAestheticCatalog"]
