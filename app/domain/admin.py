from __future__ import annotations

import secrets

__all__ = [
    "ADMIN_USERNAME",
    "ADMIN_PAGE_HTML",
    "AdminPortal",
]

ADMIN_USERNAME = "admin"
ADMIN_PAGE_HTML = "<html><h1>Super Secret Admin Portal</h1></html>"


class AdminPortal:
    """Holds the process-wide admin secret and checks credentials against it."""

    def __init__(self, password: str) -> None:
        if not password:
            raise ValueError("admin password must be a non-empty string")
        self._password = password

    def check(self, username: str, password: str) -> bool:
        """Return True if the credentials match `admin` / the secret.

        Both comparisons always run, in constant time.
        """
        user_ok = secrets.compare_digest(username.encode("utf-8"), ADMIN_USERNAME.encode("utf-8"))
        pass_ok = secrets.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        return user_ok and pass_ok
