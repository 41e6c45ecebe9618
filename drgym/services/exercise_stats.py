"""Per-user exercise history used by the activity calendar."""
import math
from collections import Counter
from datetime import datetime, time, timedelta

from marshmallow import ValidationError

from drgym.errors import ValidationFailure
from drgym.schemas import PeriodSchema
from drgym.services.assembler import ExerciseNames

period_schema = PeriodSchema()

MAX_LEVEL = 3


def parse_period(args):
    """Read ``startDate``/``endDate`` (YYYY-MM-DD, both inclusive)."""
    try:
        data = period_schema.load(dict(args))
    except ValidationError as err:
        raise ValidationFailure.from_marshmallow(err) from err
    return data["start_date"], data["end_date"]


def activity_level(count, busiest):
    if busiest <= 0 or count <= 0:
        return 0
    return max(1, min(MAX_LEVEL, math.ceil(count * MAX_LEVEL / busiest)))


class ExerciseStats:
    def __init__(self, workout_store, activity_store, exercise_store):
        self.workouts = workout_store
        self.activities = activity_store
        self.exercises = exercise_store

    def _workouts_in_period(self, username, start, end):
        # whole days: [start 00:00, day after end 00:00)
        return self.workouts.find_by_username_in_period(
            username,
            datetime.combine(start, time.min),
            datetime.combine(end + timedelta(days=1), time.min),
        )

    def exercises_in_period(self, username, start, end):
        names = ExerciseNames(self.exercises)
        entries = []
        for workout in self._workouts_in_period(username, start, end):
            for activity in self.activities.find_by_workout_id(workout.id):
                entries.append({
                    "date": workout.start_date.date().isoformat(),
                    "workout_id": workout.id,
                    "exercise_id": activity.exercise_id,
                    "exercise_name": names.get(activity.exercise_id),
                    "weight": activity.weight,
                    "reps": activity.reps,
                    "duration": activity.duration,
                    "distance": activity.distance,
                })
        return entries

    def daily_exercise_count(self, username, start, end):
        counts = Counter()
        for workout in self._workouts_in_period(username, start, end):
            counts[workout.start_date.date()] += len(self.activities.find_by_workout_id(workout.id))

        days = sorted(day for day, count in counts.items() if count > 0)
        busiest = max((counts[day] for day in days), default=0)
        return [
            {"date": day.isoformat(), "count": counts[day], "level": activity_level(counts[day], busiest)}
            for day in days
        ]
