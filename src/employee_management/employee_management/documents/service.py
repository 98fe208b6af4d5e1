from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import DocumentStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from ..users.service import require_user
from .model import Document
from .repository import DocumentRepository
from .storage import LocalFileStorage

UPDATABLE_FIELDS = frozenset({"document_type", "file_name", "description", "status"})


class DocumentService:
    def __init__(
        self,
        documents: DocumentRepository,
        users: UserRepository,
        storage: LocalFileStorage,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._documents = documents
        self._users = users
        self._storage = storage
        self._clock = clock

    def create_document(
        self,
        *,
        created_by_id: int,
        assigned_to_id: Optional[int] = None,
        document_type: Optional[str] = None,
        file_name: Optional[str] = None,
        file_path: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Document:
        created_by = require_user(self._users, created_by_id, "Creator")
        assigned_to = require_user(self._users, assigned_to_id, "Assignee") if assigned_to_id is not None else None

        document = Document(
            document_type=document_type,
            file_name=file_name,
            file_path=file_path,
            description=description,
            status=status or DocumentStatus.PENDING.value,
            created_at=self._clock(),
        )
        document.created_by = created_by
        document.assigned_to = assigned_to
        return self._documents.add(document)

    def upload(
        self,
        *,
        data: bytes,
        document_type: str,
        file_name: str,
        created_by_id: Optional[int] = None,
    ) -> Document:
        """Write the payload to the upload directory, then record it.

        Raises IOFailure when the write fails; no record is created then.
        """
        if not document_type or not str(document_type).strip():
            raise ValidationError("documentType is required")
        created_by = require_user(self._users, created_by_id, "Creator") if created_by_id is not None else None

        path = self._storage.write(file_name, data)

        document = Document(
            document_type=document_type,
            file_name=file_name,
            file_path=str(path),
            status=DocumentStatus.PENDING.value,
            created_at=self._clock(),
        )
        document.created_by = created_by
        return self._documents.add(document)

    def list_documents(self, *, status: Optional[str] = None) -> Sequence[Document]:
        if status:
            return self._documents.list_by_status(status)
        return self._documents.list_all()

    def get_document(self, document_id: int) -> Document:
        document = self._documents.get_by_id(int(document_id))
        if not document:
            raise NotFoundError(f"Document {document_id} not found")
        return document

    def list_created_by(self, user_id: int) -> Sequence[Document]:
        require_user(self._users, user_id)
        return self._documents.list_by_created_by(int(user_id))

    def list_assigned_to(self, user_id: int) -> Sequence[Document]:
        require_user(self._users, user_id)
        return self._documents.list_by_assigned_to(int(user_id))

    def update_document(self, document_id: int, changes: dict) -> Document:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update document fields: {', '.join(sorted(unknown))}")

        document = self.get_document(document_id)
        for field_name, value in changes.items():
            setattr(document, field_name, value)
        return self._documents.save(document)
