from datetime import datetime
from drgym.extensions import db

class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), db.ForeignKey("users.username"), nullable=False, index=True)
    title = db.Column(db.String(150), nullable=False)
    content = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    # optional "training" shown with the post
    workout_id = db.Column(db.Integer, db.ForeignKey("workouts.id", ondelete="SET NULL"), nullable=True)

    __table_args__ = (
        db.Index("idx_posts_username_created", "username", "created_at"),
    )

    def __repr__(self):
        return f"<Post {self.id} {self.username}>"
