"""
library-site Package

Content and lead-capture backend for a self-study library website, built with
FastAPI and SQLAlchemy.
"""

__version__ = "0.1.0"

__all__ = [
    "api",
    "core",
    "models",
    "services",
    "stores",
]
