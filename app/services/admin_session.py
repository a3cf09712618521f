"""
Admin mode gate.

This is a UI toggle, not a security boundary: the check is a plain
comparison against a fixed credential pair and there is no token or expiry.
"""

import logging
from enum import Enum

from app.core.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

ADMIN_USER = "admin"
ADMIN_PASSWORD = "admin"


class AdminState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AdminSession:
    def __init__(self):
        self.state = AdminState.ANONYMOUS
        self.login_error = False

    @property
    def is_authenticated(self) -> bool:
        return self.state == AdminState.AUTHENTICATED

    def login(self, user: str, password: str) -> bool:
        if user == ADMIN_USER and password == ADMIN_PASSWORD:
            self.state = AdminState.AUTHENTICATED
            self.login_error = False
            logger.info("Admin session authenticated")
            return True

        self.login_error = True
        logger.warning("Admin login rejected")
        return False

    def logout(self) -> None:
        self.state = AdminState.ANONYMOUS
        logger.info("Admin session closed")

    def require_authenticated(self) -> None:
        if not self.is_authenticated:
            raise NotAuthenticatedError()
