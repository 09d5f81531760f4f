"""Authentication adapters."""

from usercontrol.infrastructure.auth.plaintext_authenticator import PlaintextAuthenticator

__all__ = ["PlaintextAuthenticator"]
