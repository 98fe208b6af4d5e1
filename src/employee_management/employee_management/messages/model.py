from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none
from ..extensions import db
from ..users.model import UserProfile, user_summary


class Message(db.Model):
    __tablename__ = "messages"

    id = db.Column(db.Integer, primary_key=True)
    subject = db.Column(db.String(200))
    content = db.Column(db.Text, nullable=False)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    sent_at = db.Column(db.DateTime)

    sender_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    recipient_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    sender = db.relationship(UserProfile, foreign_keys=[sender_id])
    recipient = db.relationship(UserProfile, foreign_keys=[recipient_id])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject": self.subject,
            "content": self.content,
            "isRead": bool(self.is_read),
            "sentAt": isoformat_or_none(self.sent_at),
            "sender": user_summary(self.sender),
            "recipient": user_summary(self.recipient),
        }
