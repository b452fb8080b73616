import base64

import pytest

from library_site.core.exceptions import AuthException
from library_site.services.auth_service import (
    AdminCredentials,
    AuthService,
    parse_basic_authorization,
)


def _header(payload: str) -> str:
    return "Basic " + base64.b64encode(payload.encode("utf-8")).decode("ascii")


def test_parse_basic_authorization_splits_at_first_colon():
    assert parse_basic_authorization(_header("admin:pa:ss")) == ("admin", "pa:ss")


@pytest.mark.parametrize(
    "header",
    [
        None,
        "",
        "Bearer abc",
        "Basic !!!not-base64!!!",
        _header("no-separator"),
    ],
)
def test_parse_basic_authorization_rejects_unusable_headers(header):
    assert parse_basic_authorization(header) is None


def test_verify_requires_exact_match():
    service = AuthService(AdminCredentials(username="admin", password="secret"))

    assert service.verify("admin", "secret") is True
    assert service.verify("Admin", "secret") is False
    assert service.verify("admin", "Secret") is False
    assert service.verify(None, "secret") is False


def test_verify_denies_everything_without_configured_password():
    service = AuthService(AdminCredentials(username="admin", password=None))

    assert service.verify("admin", "") is False
    assert service.verify("admin", "anything") is False


def test_authenticate_header_reports_missing_and_wrong_credentials():
    service = AuthService(AdminCredentials(username="admin", password="secret"))

    with pytest.raises(AuthException) as missing:
        service.authenticate_header(None)
    assert missing.value.message == "Unauthorized"
    assert missing.value.http_status == 401

    with pytest.raises(AuthException) as wrong:
        service.authenticate_header(_header("admin:nope"))
    assert wrong.value.message == "Invalid credentials"
    assert wrong.value.http_status == 401

    assert service.authenticate_header(_header("admin:secret")) == "admin"


def test_credentials_repr_masks_password():
    credentials = AdminCredentials(username="admin", password="secret")
    assert "secret" not in repr(credentials)
