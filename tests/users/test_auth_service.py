from __future__ import annotations

from typing import Optional

import pytest

from employee_management.core.enums import Role
from employee_management.core.exceptions import AuthenticationError, ConflictError, ValidationError
from employee_management.users.model import Credential, UserProfile
from employee_management.users.service import AuthService


class InMemoryCredentials:
    def __init__(self):
        self.by_username: dict[str, Credential] = {}
        self._id = 0

    def get_by_username(self, username: str) -> Optional[Credential]:
        return self.by_username.get(username)

    def exists_by_username(self, username: str) -> bool:
        return username in self.by_username

    def add(self, credential: Credential) -> Credential:
        self._id += 1
        credential.id = self._id
        self.by_username[credential.username] = credential
        return credential


class InMemoryUsers:
    def __init__(self):
        self.by_id: dict[int, UserProfile] = {}
        self._id = 100

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        return self.by_id.get(user_id)

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        return next((u for u in self.by_id.values() if u.username == username), None)

    def add(self, user: UserProfile) -> UserProfile:
        self._id += 1
        user.id = self._id
        self.by_id[user.id] = user
        return user


class FailingUsers(InMemoryUsers):
    def add(self, user: UserProfile) -> UserProfile:
        raise RuntimeError("connection lost")


@pytest.fixture
def credentials():
    return InMemoryCredentials()


@pytest.fixture
def users():
    return InMemoryUsers()


@pytest.fixture
def auth(credentials, users):
    return AuthService(credentials, users)


def test_signup_creates_matching_credential_and_profile(auth, credentials, users):
    result = auth.signup(username="alice", password="pw", name="Alice", email="a@example.com", role="employee")

    assert result.status == "success"
    assert result.message == "User registered successfully"
    assert result.role == Role.EMPLOYEE.value

    assert list(credentials.by_username) == ["alice"]
    assert len(users.by_id) == 1
    profile = users.by_id[result.user_id]
    assert profile.username == credentials.by_username["alice"].username
    assert profile.role == credentials.by_username["alice"].role
    assert profile.password == "pw"


@pytest.mark.parametrize(
    "fields",
    [
        {"password": "pw", "role": "EMPLOYEE"},
        {"password": "other", "role": "CUSTOMER", "name": "Someone else"},
        {"password": "", "role": "NOT_A_ROLE"},
    ],
)
def test_signup_existing_username_conflicts_regardless_of_fields(auth, credentials, users, fields):
    auth.signup(username="bob", password="pw1", role="EMPLOYEE")

    with pytest.raises(ConflictError):
        auth.signup(username="bob", **fields)

    assert len(credentials.by_username) == 1
    assert len(users.by_id) == 1


def test_signup_rejects_unknown_role(auth, credentials):
    with pytest.raises(ValidationError):
        auth.signup(username="carol", password="pw", role="MANAGER")
    assert credentials.by_username == {}


def test_signup_then_login_scenario(auth):
    signed_up = auth.signup(username="bob", password="pw1", role="EMPLOYEE")

    logged_in = auth.login(username="bob", password="pw1")
    assert logged_in.status == "success"
    assert logged_in.message == "Login successful"
    assert logged_in.role == "EMPLOYEE"
    assert logged_in.user_id == signed_up.user_id

    with pytest.raises(AuthenticationError):
        auth.login(username="bob", password="wrong")


def test_login_password_comparison_is_case_sensitive(auth):
    auth.signup(username="bob", password="Secret", role="EMPLOYEE")

    with pytest.raises(AuthenticationError):
        auth.login(username="bob", password="secret")


def test_login_unknown_username(auth):
    with pytest.raises(AuthenticationError, match="Invalid username or password"):
        auth.login(username="ghost", password="pw")


def test_login_without_profile_fails(auth, credentials):
    credentials.add(Credential(username="orphan", password="pw", role="EMPLOYEE"))

    with pytest.raises(AuthenticationError, match="User profile not found"):
        auth.login(username="orphan", password="pw")


def test_tokens_are_unique_across_calls(auth):
    tokens = {auth.signup(username="bob", password="pw1", role="EMPLOYEE").token}
    for _ in range(20):
        tokens.add(auth.login(username="bob", password="pw1").token)

    assert len(tokens) == 21


def test_signup_failure_after_credential_write_is_not_rolled_back(credentials):
    auth = AuthService(credentials, FailingUsers())

    with pytest.raises(RuntimeError):
        auth.signup(username="dave", password="pw", role="CUSTOMER")

    # The credential commit stands on its own.
    assert credentials.exists_by_username("dave")


def test_padded_username_is_stored_and_matched_as_sent(auth, credentials):
    auth.signup(username="bob", password="pw0", role="EMPLOYEE")
    padded = auth.signup(username="bob ", password="pw1", role="EMPLOYEE")

    assert sorted(credentials.by_username) == ["bob", "bob "]
    assert auth.login(username="bob ", password="pw1").user_id == padded.user_id
    with pytest.raises(AuthenticationError):
        auth.login(username="bob", password="pw1")


def test_signup_rejects_blank_username(auth, credentials):
    with pytest.raises(ValidationError):
        auth.signup(username="   ", password="pw", role="EMPLOYEE")
    assert credentials.by_username == {}
