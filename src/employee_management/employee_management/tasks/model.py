from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import TaskPriority, TaskStatus
from ..extensions import db
from ..users.model import UserProfile, user_summary


class Task(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200))
    description = db.Column(db.Text)
    priority = db.Column(db.String(20), default=TaskPriority.MEDIUM.value)
    status = db.Column(db.String(30), default=TaskStatus.PENDING.value, index=True)
    due_date = db.Column(db.DateTime, index=True)
    created_at = db.Column(db.DateTime)

    created_by_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    assigned_to_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    created_by = db.relationship(UserProfile, foreign_keys=[created_by_id])
    assigned_to = db.relationship(UserProfile, foreign_keys=[assigned_to_id])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "status": self.status,
            "dueDate": isoformat_or_none(self.due_date),
            "createdAt": isoformat_or_none(self.created_at),
            "createdBy": user_summary(self.created_by),
            "assignedTo": user_summary(self.assigned_to),
        }
