"""Testimonials domain: submitted and approved client quotes"""

from .router import router

__all__ = ["router"]
