from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import DocumentStatus
from ..extensions import db
from ..users.model import UserProfile, user_summary


class Document(db.Model):
    __tablename__ = "documents"

    id = db.Column(db.Integer, primary_key=True)
    document_type = db.Column(db.String(100))
    file_name = db.Column(db.String(255))
    file_path = db.Column(db.String(500))
    description = db.Column(db.Text)
    status = db.Column(db.String(30), default=DocumentStatus.PENDING.value, index=True)
    created_at = db.Column(db.DateTime)

    created_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    assigned_to_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    created_by = db.relationship(UserProfile, foreign_keys=[created_by_id])
    assigned_to = db.relationship(UserProfile, foreign_keys=[assigned_to_id])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "documentType": self.document_type,
            "fileName": self.file_name,
            "filePath": self.file_path,
            "description": self.description,
            "status": self.status,
            "createdAt": isoformat_or_none(self.created_at),
            "createdBy": user_summary(self.created_by),
            "assignedTo": user_summary(self.assigned_to),
        }
