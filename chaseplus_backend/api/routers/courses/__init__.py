"""
Courses router package.

Exports the public and admin routers for course endpoints.
"""

from .courses_router import admin_router, router

__all__ = ["admin_router", "router"]
