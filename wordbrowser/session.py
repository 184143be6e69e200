"""Signed-in user identity."""

from typing import Optional


class NotLoggedInError(Exception):
    """Raised when a per-user list is requested without a user."""

    pass


class Session:
    """Opaque identity signal from the authentication provider."""

    def __init__(self, user_id: Optional[str] = None):
        self.user_id = user_id or None

    @property
    def is_logged_in(self) -> bool:
        return self.user_id is not None

    def login(self, user_id: str) -> None:
        if not user_id:
            raise ValueError("user_id must not be empty")
        self.user_id = user_id

    def logout(self) -> None:
        self.user_id = None

    def require_user(self) -> str:
        if self.user_id is None:
            raise NotLoggedInError("Not logged in")
        return self.user_id
