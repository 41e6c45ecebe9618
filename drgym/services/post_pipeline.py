"""Post creation, update and deletion.

Every operation authorizes the acting user before touching a store. Nested
Post + Workout + Activities creation runs in a single transaction: if any
write fails nothing is committed, so a Post never points at a Workout that
was not persisted.
"""
import logging
from contextlib import contextmanager
from datetime import datetime

from marshmallow import ValidationError

from drgym.errors import NotFound, PersistenceFailure, Unauthorized, ValidationFailure
from drgym.models import Activity, Post, Workout
from drgym.schemas import PostCreateSchema, PostUpdateSchema, PostWithWorkoutSchema
from drgym.services.assembler import ExerciseNames

logger = logging.getLogger(__name__)

post_create_schema = PostCreateSchema()
post_with_workout_schema = PostWithWorkoutSchema()
post_update_schema = PostUpdateSchema()


def _load(schema, payload):
    try:
        return schema.load(payload)
    except ValidationError as err:
        raise ValidationFailure.from_marshmallow(err) from err


class PostWritePipeline:
    def __init__(self, session, guard, assembler, post_store, workout_store,
                 activity_store, exercise_store, reaction_store):
        self.session = session
        self.guard = guard
        self.assembler = assembler
        self.posts = post_store
        self.workouts = workout_store
        self.activities = activity_store
        self.exercises = exercise_store
        self.reactions = reaction_store

    # ------- helpers -------
    def _authorize_author(self, verification, payload):
        username = payload.get("username") if isinstance(payload, dict) else None
        if not self.guard.authorize_owner_only(verification, username):
            raise Unauthorized()

    @contextmanager
    def _transaction(self, action):
        try:
            yield
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            logger.exception("Failed to %s", action)
            raise PersistenceFailure(f"Failed to {action}") from exc

    def _owned_workout(self, workout_id, username):
        # someone else's workout is reported exactly like a missing one
        workout = self.workouts.find_by_id(workout_id)
        if workout is None or workout.username != username:
            raise ValidationFailure("Invalid workout ID")
        return workout

    def _owned_post(self, verification, post_id):
        if verification is None or not verification.ok:
            raise Unauthorized()
        post = self.posts.find_by_id(post_id)
        if post is None or not self.guard.authorize_owner_or_friend(verification, post.username):
            raise NotFound("Post not found")
        if not self.guard.authorize_owner_only(verification, post.username):
            raise Unauthorized()
        return post

    def _created(self, post):
        return {
            "msg": "Post created successfully",
            "id": post.id,
            "post": self.assembler.enrich_post(post),
        }

    # ------- operations -------
    def create_post(self, verification, payload):
        self._authorize_author(verification, payload)
        data = _load(post_create_schema, payload)

        workout = None
        if data["workout_id"] is not None:
            workout = self._owned_workout(data["workout_id"], data["username"])

        post = Post(
            username=data["username"],
            title=data["title"],
            content=data["content"],
            created_at=datetime.utcnow(),
            workout_id=workout.id if workout is not None else None,
        )
        with self._transaction("create post"):
            self.posts.save(post)

        logger.info("Post %s created by %s", post.id, post.username)
        return self._created(post)

    def create_post_with_workout(self, verification, payload):
        self._authorize_author(verification, payload)
        data = _load(post_with_workout_schema, payload)

        now = datetime.utcnow()
        post = Post(
            username=data["username"],
            title=data["title"],
            content=data["content"],
            created_at=now,
        )
        workout_data = data["workout"]

        with self._transaction("create post"):
            if workout_data is not None:
                workout = self.workouts.save(Workout(
                    username=data["username"],
                    start_date=workout_data["start_date"],
                    end_date=workout_data["end_date"],
                    description=workout_data["description"],
                    created_at=now,
                ))
                names = ExerciseNames(self.exercises)
                for activity_data in workout_data["activities"]:
                    self.activities.save(Activity(
                        workout_id=workout.id,
                        exercise_id=activity_data["exercise_id"],
                        exercise_name=names.get(activity_data["exercise_id"]),
                        weight=activity_data["weight"],
                        reps=activity_data["reps"],
                        duration=activity_data["duration"],
                        distance=activity_data["distance"],
                    ))
                post.workout_id = workout.id
            self.posts.save(post)

        logger.info("Post %s created by %s (workout %s)", post.id, post.username, post.workout_id)
        return self._created(post)

    def update_post(self, verification, post_id, payload):
        post = self._owned_post(verification, post_id)
        data = _load(post_update_schema, payload)

        if data["workout_id"] is not None:
            post.workout_id = self._owned_workout(data["workout_id"], post.username).id
        post.title = data["title"]
        post.content = data["content"]

        with self._transaction("update post"):
            self.posts.save(post)

        logger.info("Post %s updated by %s", post.id, post.username)
        return self.assembler.enrich_post(post)

    def delete_post(self, verification, post_id):
        post = self._owned_post(verification, post_id)
        with self._transaction("delete post"):
            self.reactions.delete_by_post_id(post.id)
            self.posts.delete(post)
        logger.info("Post %s deleted by %s", post_id, verification.subject)
