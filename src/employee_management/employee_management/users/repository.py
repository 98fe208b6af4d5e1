from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Credential, UserProfile


class CredentialRepository(Protocol):
    """Repository interface for the credential store.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_username(self, username: str) -> Optional[Credential]:
        raise NotImplementedError

    def exists_by_username(self, username: str) -> bool:
        raise NotImplementedError

    def add(self, credential: Credential) -> Credential:
        raise NotImplementedError


class UserRepository(Protocol):
    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[UserProfile]:
        raise NotImplementedError

    def list_by_role(self, role: str) -> Sequence[UserProfile]:
        raise NotImplementedError

    def add(self, user: UserProfile) -> UserProfile:
        raise NotImplementedError
