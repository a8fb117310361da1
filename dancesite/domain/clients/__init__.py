"""Clients domain: registration and CRUD endpoints"""

from .router import router

__all__ = ["router"]
