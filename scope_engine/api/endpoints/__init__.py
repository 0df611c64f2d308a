"""API endpoints package."""

from . import health
from . import scope
from . import assist
from . import knowledge_base

__all__ = ["health", "scope", "assist", "knowledge_base"]
