"""API routes package"""

from . import health, shopping

__all__ = ["health", "shopping"]
