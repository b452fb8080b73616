"""
API Layer

HTTP surface of library-site: public content routes and the admin API.
"""

from .factory import create_api

__all__ = ["create_api"]
