from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import AUTH_SUCCESS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import Credential, UserProfile
from .repository import CredentialRepository, UserRepository

logger = logging.getLogger(__name__)


def generate_token() -> str:
    """Opaque bearer value. Not signed, never expires, never checked again."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class AuthResponse:
    """What signup/login hand back to the client."""

    status: str
    message: str
    username: str
    role: str
    token: str
    user_id: Optional[int]

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "message": self.message,
            "username": self.username,
            "role": self.role,
            "token": self.token,
            "userId": self.user_id,
        }


def parse_role(value: Optional[str]) -> Role:
    try:
        return Role(str(value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid role: {value!r}")


class AuthService:
    """Use case: signup and login against the credential store and user directory."""

    def __init__(
        self,
        credentials: CredentialRepository,
        users: UserRepository,
        *,
        token_factory: Callable[[], str] = generate_token,
    ):
        self._credentials = credentials
        self._users = users
        self._token_factory = token_factory

    def signup(
        self,
        *,
        username: str,
        password: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AuthResponse:
        require_non_empty(username, "Username")
        if self._credentials.exists_by_username(username):
            raise ConflictError("Username already exists")

        if not password:
            raise ValidationError("Password is required")
        role_value = parse_role(role).value

        # Two separate commits: a failure after the first leaves a Credential
        # with no matching UserProfile.
        credential = self._credentials.add(Credential(username=username, password=password, role=role_value))
        user = self._users.add(
            UserProfile(
                username=username,
                name=(name or "").strip() or None,
                email=(email or "").strip() or None,
                password=password,
                role=role_value,
            )
        )
        logger.info("Registered %s with role %s", username, role_value)

        return AuthResponse(
            status=AUTH_SUCCESS,
            message="User registered successfully",
            username=credential.username,
            role=credential.role,
            token=self._token_factory(),
            user_id=user.id,
        )

    def login(self, *, username: str, password: str) -> AuthResponse:
        credential = self._credentials.get_by_username(username or "")
        if credential is None or credential.password != password:
            logger.info("Rejected login for %r", username)
            raise AuthenticationError("Invalid username or password")

        user = self._users.get_by_username(credential.username)
        if user is None:
            logger.warning("Credential %r has no user profile", credential.username)
            raise AuthenticationError("User profile not found")

        return AuthResponse(
            status=AUTH_SUCCESS,
            message="Login successful",
            username=credential.username,
            role=credential.role,
            token=self._token_factory(),
            user_id=user.id,
        )


class UserService:
    """Use case: read the user directory."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, *, role: Optional[str] = None) -> Sequence[UserProfile]:
        if role:
            return self._users.list_by_role(role.strip().upper())
        return self._users.list_all()

    def get_user(self, user_id: int) -> UserProfile:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user


def require_user(users: UserRepository, user_id: int, label: str = "User") -> UserProfile:
    """Resolve a user id for the registries, raising NotFoundError when absent."""
    user = users.get_by_id(int(user_id))
    if not user:
        raise NotFoundError(f"{label} {user_id} not found")
    return user
