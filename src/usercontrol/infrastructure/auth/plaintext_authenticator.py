"""Plaintext authenticator - exact comparison against the stored secret."""

from usercontrol.domain.entities import User


class PlaintextAuthenticator:
    """Stateless credential check. Secrets are stored and compared verbatim."""

    def authenticate(self, user: User | None, username: str, secret: str) -> bool:
        """True iff user exists and both username and secret match exactly."""
        if user is None:
            return False
        return user.username == username and user.secret == secret
