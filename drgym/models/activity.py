from drgym.extensions import db

class Activity(db.Model):
    __tablename__ = "activities"

    id = db.Column(db.Integer, primary_key=True)
    workout_id = db.Column(db.Integer, db.ForeignKey("workouts.id"), nullable=False)
    # plain reference into the exercise catalog, may dangle after a catalog cleanup
    exercise_id = db.Column(db.Integer, nullable=False)
    # copy of Exercise.name taken when the activity was created, never re-synced
    exercise_name = db.Column(db.String(100), nullable=True)

    # Performance details
    weight = db.Column(db.Float)
    reps = db.Column(db.Integer)
    duration = db.Column(db.Integer)  # seconds
    distance = db.Column(db.Float)  # km, for cardio exercises

    __table_args__ = (
        db.Index("idx_activities_workout_id", "workout_id"),
        db.Index("idx_activities_exercise_id", "exercise_id"),
    )

    def __repr__(self):
        return f"<Activity {self.workout_id}-{self.exercise_id}>"
