"""Bookings domain: lifecycle rules, search and CRUD endpoints"""

from .router import router

__all__ = ["router"]
