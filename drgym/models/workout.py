from datetime import datetime
from drgym.extensions import db

class Workout(db.Model):
    __tablename__ = "workouts"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), db.ForeignKey("users.username"), nullable=False, index=True)

    start_date = db.Column(db.DateTime, nullable=False, index=True)
    end_date = db.Column(db.DateTime, nullable=False)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Activities are fetched through the activity store, never embedded here.

    __table_args__ = (
        db.Index("idx_workouts_username_start", "username", "start_date"),
    )

    def __repr__(self):
        return f"<Workout {self.id} {self.username}>"
