from __future__ import annotations

from typing import Optional

from ..extensions import db


class Credential(db.Model):
    """Login secret for one username.

    Note: The password is stored and compared as plain text. Kept for
    compatibility with existing clients; this is a known security defect.
    """

    __tablename__ = "auth"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<Credential {self.username}>"


class UserProfile(db.Model):
    """Business-facing identity referenced by tasks, documents, appointments, feedback and messages.

    Mirrors a Credential with the same username and role. The link is kept by
    the auth service, not by a foreign key.
    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100))
    email = db.Column(db.String(120), index=True)
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }

    def __repr__(self) -> str:
        return f"<UserProfile {self.username}>"


def user_summary(user: Optional[UserProfile]) -> Optional[dict]:
    return user.to_dict() if user is not None else None
