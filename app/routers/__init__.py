"""
API Routers
Separate router modules for each domain.
"""

from app.routers import collector

__all__ = ["collector"]
