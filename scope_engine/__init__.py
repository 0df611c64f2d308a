"""AI-assisted scope of work generation and refinement engine."""

__version__ = "1.0.0"
