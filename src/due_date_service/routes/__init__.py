"""API route modules."""

from . import dates, health

__all__ = ["health", "dates"]
