from datetime import datetime

from board.db import db


TARGET_TYPES = ("post", "comment")
DIRECTIONS = ("up", "down")


class Vote(db.Model):
    __tablename__ = "votes"

    id = db.Column(db.Integer, primary_key=True)

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    target_type = db.Column(
        db.String(20), nullable=False
    )  # "post" | "comment"

    target_id = db.Column(db.Integer, nullable=False)

    direction = db.Column(db.String(4), nullable=False)  # "up" | "down"

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "target_type", "target_id",
            name="unique_user_vote"
        ),
    )
