from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.session import default_session, exists, fetchall, fetchone, session_scope
from .model import Credential, UserProfile
from .repository import CredentialRepository, UserRepository


class SQLAlchemyCredentialRepository(CredentialRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def get_by_username(self, username: str) -> Optional[Credential]:
        return fetchone(self._session, select(Credential).where(Credential.username == username))

    def exists_by_username(self, username: str) -> bool:
        return exists(self._session, Credential, Credential.username == username)

    def add(self, credential: Credential) -> Credential:
        with session_scope(self._session) as s:
            s.add(credential)
        return credential


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        return self._session.get(UserProfile, int(user_id))

    def get_by_username(self, username: str) -> Optional[UserProfile]:
        return fetchone(self._session, select(UserProfile).where(UserProfile.username == username))

    def list_all(self) -> Sequence[UserProfile]:
        return fetchall(self._session, select(UserProfile).order_by(UserProfile.id))

    def list_by_role(self, role: str) -> Sequence[UserProfile]:
        return fetchall(
            self._session,
            select(UserProfile).where(UserProfile.role == role).order_by(UserProfile.id),
        )

    def add(self, user: UserProfile) -> UserProfile:
        with session_scope(self._session) as s:
            s.add(user)
        return user
