import base64
import os
import tempfile

# Test configuration must be in place before library_site reads its settings.
os.environ["DATABASE__URL"] = "sqlite://"
os.environ["ADMIN__USERNAME"] = "admin"
os.environ["ADMIN__PASSWORD"] = "secret"
os.environ["LOGFIRE__ENABLED"] = "false"
os.environ.setdefault("LOG__DIR", tempfile.mkdtemp(prefix="library-site-logs-"))

import pytest
from fastapi.testclient import TestClient

from library_site.api.factory import create_api
from library_site.stores.database import Base, create_tables, engine


def basic_auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def database():
    """Fresh in-memory schema for each test."""
    create_tables()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(database) -> TestClient:
    return TestClient(create_api(enable_logfire=False))


@pytest.fixture
def admin_headers() -> dict:
    return basic_auth("admin", "secret")
