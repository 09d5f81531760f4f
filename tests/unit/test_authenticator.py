"""Unit tests for PlaintextAuthenticator."""

import pytest

from usercontrol.domain.entities import User, administrator
from usercontrol.infrastructure.auth import PlaintextAuthenticator


@pytest.fixture
def maria() -> User:
    return User(username="maria", secret="1234", role=administrator())


def test_correct_credentials(maria: User) -> None:
    """Matching username and secret authenticate."""
    assert PlaintextAuthenticator().authenticate(maria, "maria", "1234") is True


def test_wrong_secret(maria: User) -> None:
    """Wrong secret fails."""
    assert PlaintextAuthenticator().authenticate(maria, "maria", "wrong") is False


def test_absent_user_fails_closed() -> None:
    """None user fails without raising."""
    assert PlaintextAuthenticator().authenticate(None, "maria", "1234") is False


def test_username_case_sensitive(maria: User) -> None:
    """Username comparison is case-sensitive."""
    assert PlaintextAuthenticator().authenticate(maria, "Maria", "1234") is False


def test_secret_not_normalized(maria: User) -> None:
    """Secret comparison does not trim whitespace."""
    assert PlaintextAuthenticator().authenticate(maria, "maria", "1234 ") is False


def test_username_mismatch_with_right_secret(maria: User) -> None:
    """Candidate user must carry the claimed username."""
    assert PlaintextAuthenticator().authenticate(maria, "juan", "1234") is False


def test_repeated_calls_same_result(maria: User) -> None:
    """Authentication is stateless across repeated calls."""
    auth = PlaintextAuthenticator()
    results = {auth.authenticate(maria, "maria", "1234") for _ in range(5)}
    assert results == {True}
    results = {auth.authenticate(maria, "maria", "nope") for _ in range(5)}
    assert results == {False}
