from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Document


class DocumentRepository(Protocol):
    def add(self, document: Document) -> Document:
        raise NotImplementedError

    def save(self, document: Document) -> Document:
        raise NotImplementedError

    def get_by_id(self, document_id: int) -> Optional[Document]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_created_by(self, user_id: int) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_assigned_to(self, user_id: int) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_status(self, status: str) -> Sequence[Document]:
        raise NotImplementedError
