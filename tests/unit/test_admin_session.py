import pytest

from app.core.exceptions import NotAuthenticatedError
from app.services.admin_session import AdminSession, AdminState


def test_failed_then_successful_login():
    admin = AdminSession()

    assert admin.login("x", "y") is False
    assert admin.state == AdminState.ANONYMOUS
    assert admin.login_error is True

    assert admin.login("admin", "admin") is True
    assert admin.state == AdminState.AUTHENTICATED
    assert admin.login_error is False


def test_logout_returns_to_anonymous():
    admin = AdminSession()
    admin.login("admin", "admin")

    admin.logout()

    assert not admin.is_authenticated
    with pytest.raises(NotAuthenticatedError):
        admin.require_authenticated()


def test_credentials_are_case_sensitive():
    admin = AdminSession()
    assert not admin.login("Admin", "admin")
    assert not admin.login("admin", "ADMIN")
