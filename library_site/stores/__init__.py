"""
Stores Package

Data persistence for library-site. Each store owns one table and opens a
fresh session per call; nothing is cached between requests.

Store classes are imported from their own modules (they depend on
library_site.models, which itself depends on this package's Base).
"""

from .database import (
    Base,
    SessionLocal,
    create_tables,
    database_session,
    dispose_engine,
    engine,
    get_pool_status,
    test_connection,
)

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "database_session",
    "create_tables",
    "test_connection",
    "get_pool_status",
    "dispose_engine",
]
