from datetime import datetime
from drgym.extensions import db


def ordered_pair(username_a, username_b):
    """Canonical (user_min, user_max) key for an unordered pair of usernames."""
    return (username_a, username_b) if username_a < username_b else (username_b, username_a)


class Friendship(db.Model):
    """
    One row per pair of friends, stored as (user_min, user_max) with
    user_min < user_max. Both directions of the relation live in the same row.
    """
    __tablename__ = "friendships"

    id = db.Column(db.Integer, primary_key=True)
    user_min = db.Column(db.String(64), db.ForeignKey("users.username", ondelete="CASCADE"), nullable=False)
    user_max = db.Column(db.String(64), db.ForeignKey("users.username", ondelete="CASCADE"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("user_min", "user_max", name="uq_friendship_pair"),
        db.CheckConstraint("user_min < user_max", name="ck_friendship_min_lt_max"),
        db.Index("idx_friendships_user_min", "user_min"),
        db.Index("idx_friendships_user_max", "user_max"),
    )

    def other(self, username):
        return self.user_max if username == self.user_min else self.user_min

    def __repr__(self):
        return f"<Friendship {self.user_min}-{self.user_max}>"
