"""Generation layers."""

from .base_generator import BaseGenerator

__all__ = ["BaseGenerator"]
