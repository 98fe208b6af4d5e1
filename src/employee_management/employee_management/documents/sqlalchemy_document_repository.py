from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.session import default_session, fetchall, session_scope
from .model import Document
from .repository import DocumentRepository


class SQLAlchemyDocumentRepository(DocumentRepository):
    def __init__(self, session=None):
        self._session = session if session is not None else default_session()

    def add(self, document: Document) -> Document:
        with session_scope(self._session) as s:
            s.add(document)
        return document

    def save(self, document: Document) -> Document:
        return self.add(document)

    def get_by_id(self, document_id: int) -> Optional[Document]:
        return self._session.get(Document, int(document_id))

    def list_all(self) -> Sequence[Document]:
        return fetchall(self._session, select(Document).order_by(Document.id))

    def list_by_created_by(self, user_id: int) -> Sequence[Document]:
        stmt = select(Document).where(Document.created_by_id == int(user_id)).order_by(Document.id)
        return fetchall(self._session, stmt)

    def list_by_assigned_to(self, user_id: int) -> Sequence[Document]:
        stmt = select(Document).where(Document.assigned_to_id == int(user_id)).order_by(Document.id)
        return fetchall(self._session, stmt)

    def list_by_status(self, status: str) -> Sequence[Document]:
        stmt = select(Document).where(Document.status == status).order_by(Document.id)
        return fetchall(self._session, stmt)
