"""Service offerings domain: the bookable services"""

from .router import router

__all__ = ["router"]
