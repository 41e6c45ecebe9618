from drgym.extensions import db
from datetime import datetime

class Exercise(db.Model):
    __tablename__ = "exercises"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    category = db.Column(db.String(50))  # cardio, strength
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.Index("idx_exercises_category", "category"),
    )

    def __repr__(self):
        return f"<Exercise {self.name}>"
