from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session, scoped_session

from ..extensions import db

T = TypeVar("T")


def default_session() -> scoped_session:
    return db.session


@contextmanager
def session_scope(session: Session | scoped_session) -> Iterator[Session | scoped_session]:
    """Commit on success, roll back on any error.

    Each repository write runs in its own scope, so two writes issued by a
    service are two independent commits.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def fetchone(session, stmt) -> Optional[T]:
    return session.execute(stmt).scalars().first()


def fetchall(session, stmt) -> Sequence[T]:
    return list(session.execute(stmt).scalars().all())


def exists(session, model, *criteria) -> bool:
    stmt = select(model.id).where(*criteria).limit(1)
    return session.execute(stmt).first() is not None
