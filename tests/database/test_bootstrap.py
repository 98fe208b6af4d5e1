from __future__ import annotations

from typing import Optional

from employee_management.database.bootstrap import ensure_admin_account
from employee_management.users.model import Credential, UserProfile


class InMemoryCredentials:
    def __init__(self):
        self.rows: list[Credential] = []

    def exists_by_username(self, username: str) -> bool:
        return any(c.username == username for c in self.rows)

    def add(self, credential: Credential) -> Credential:
        self.rows.append(credential)
        return credential


class InMemoryUsers:
    def __init__(self):
        self.rows: list[UserProfile] = []

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        return next((u for u in self.rows if u.username == username), None)

    def add(self, user: UserProfile) -> UserProfile:
        self.rows.append(user)
        return user


def test_bootstrap_on_empty_store_creates_one_admin_pair():
    credentials, users = InMemoryCredentials(), InMemoryUsers()

    assert ensure_admin_account(credentials, users) is True

    assert [(c.username, c.password, c.role) for c in credentials.rows] == [("admin", "admin123", "ADMIN")]
    assert [(u.username, u.role, u.name, u.email) for u in users.rows] == [
        ("admin", "ADMIN", "Administrator", "admin@example.com")
    ]


def test_bootstrap_second_run_creates_nothing():
    credentials, users = InMemoryCredentials(), InMemoryUsers()
    ensure_admin_account(credentials, users)

    assert ensure_admin_account(credentials, users) is False
    assert len(credentials.rows) == 1
    assert len(users.rows) == 1


def test_bootstrap_checks_credential_store_only():
    credentials, users = InMemoryCredentials(), InMemoryUsers()
    credentials.add(Credential(username="admin", password="changed", role="ADMIN"))

    assert ensure_admin_account(credentials, users) is False
    assert users.rows == []
