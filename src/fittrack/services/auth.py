"""PIN authentication for the single user."""

import hmac
from dataclasses import dataclass
from uuid import UUID

AUTH_COOKIE_NAME = "fittrack_auth"
AUTH_COOKIE_MAX_AGE = 60 * 60 * 24 * 30


@dataclass
class AuthService:
    """Verifies the login PIN and the session cookie."""

    pin: str
    user_id: UUID

    def verify_pin(self, pin: str) -> bool:
        """Return True when the PIN matches the configured one."""
        return hmac.compare_digest(pin.encode(), self.pin.encode())

    def session_value(self) -> str:
        """Return the value stored in the auth cookie after login."""
        return str(self.user_id)

    def user_for_session(self, cookie_value: str | None) -> UUID | None:
        """Return the user id for a cookie value, or None if not logged in."""
        if not cookie_value or cookie_value != self.session_value():
            return None
        return self.user_id
