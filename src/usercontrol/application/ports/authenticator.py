"""Authenticator port - credential verification."""

from typing import Protocol

from usercontrol.domain.entities import User


class Authenticator(Protocol):
    """Port for verifying a claimed username/secret against a candidate user."""

    def authenticate(self, user: User | None, username: str, secret: str) -> bool: ...
