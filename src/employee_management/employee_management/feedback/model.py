from __future__ import annotations

from ..common.datetime_utils import isoformat_or_none
from ..extensions import db
from ..users.model import UserProfile, user_summary


class Feedback(db.Model):
    __tablename__ = "feedback"

    id = db.Column(db.Integer, primary_key=True)
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer)
    created_at = db.Column(db.DateTime)

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"))
    user = db.relationship(UserProfile, foreign_keys=[user_id])

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "rating": self.rating,
            "createdAt": isoformat_or_none(self.created_at),
            "user": user_summary(self.user),
        }
