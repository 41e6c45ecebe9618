"""Builds the nested Post -> Workout -> Activity -> exercise name responses."""
import logging

from drgym.schemas import ActivitySchema, PostSchema, WorkoutSchema

logger = logging.getLogger(__name__)

post_schema = PostSchema()
workout_schema = WorkoutSchema()
activity_schema = ActivitySchema()


class ExerciseNames:
    """Resolves exercise names through the catalog, once per exercise id."""

    def __init__(self, exercise_store):
        self.exercise_store = exercise_store
        self._names = {}

    def get(self, exercise_id):
        if exercise_id not in self._names:
            exercise = self.exercise_store.find_by_id(exercise_id)
            if exercise is None:
                logger.warning("Activity references unknown exercise %s", exercise_id)
            self._names[exercise_id] = exercise.name if exercise is not None else None
        return self._names[exercise_id]


class AggregateAssembler:
    def __init__(self, post_store, workout_store, activity_store, exercise_store):
        self.posts = post_store
        self.workouts = workout_store
        self.activities = activity_store
        self.exercises = exercise_store

    def assemble_post(self, post_id):
        post = self.posts.find_by_id(post_id)
        if post is None:
            return None
        return self.enrich_post(post)

    def assemble_posts_for(self, usernames):
        names = ExerciseNames(self.exercises)
        return [self.enrich_post(post, names) for post in self.posts.find_by_usernames(usernames)]

    def assemble_workouts_for(self, username):
        names = ExerciseNames(self.exercises)
        return [self.enrich_workout(workout, names) for workout in self.workouts.find_by_username(username)]

    def enrich_post(self, post, names=None):
        names = names or ExerciseNames(self.exercises)
        data = post_schema.dump(post)
        workout = self.workouts.find_by_id(post.workout_id) if post.workout_id else None
        data["training"] = self.enrich_workout(workout, names) if workout is not None else None
        return data

    def enrich_workout(self, workout, names=None):
        """Attach the workout's activities, each named after its current catalog entry.

        The name is overlaid on the response only; the stored copy on the
        activity is left as it was written.
        """
        names = names or ExerciseNames(self.exercises)
        data = workout_schema.dump(workout)
        data["activities"] = [
            self.enrich_activity(activity, names)
            for activity in self.activities.find_by_workout_id(workout.id)
        ]
        return data

    def enrich_activity(self, activity, names=None):
        names = names or ExerciseNames(self.exercises)
        data = activity_schema.dump(activity)
        data["exercise_name"] = names.get(activity.exercise_id)
        return data
