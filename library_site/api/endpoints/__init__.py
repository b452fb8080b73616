"""
API Endpoints Package

FastAPI endpoint definitions for library-site.
"""

from . import auth, contacts, content, health, site_settings

__all__ = ["auth", "contacts", "content", "health", "site_settings"]
