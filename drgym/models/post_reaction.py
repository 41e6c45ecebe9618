from datetime import datetime
from drgym.extensions import db

class PostReaction(db.Model):
    __tablename__ = "post_reactions"

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    username = db.Column(db.String(64), db.ForeignKey("users.username", ondelete="CASCADE"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("post_id", "username", name="uq_post_reaction_post_user"),
        db.Index("idx_post_reactions_post_id", "post_id"),
    )

    def __repr__(self):
        return f"<PostReaction {self.post_id}-{self.username}>"
