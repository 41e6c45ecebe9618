import logging

from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError

from drgym.errors import PersistenceFailure, ValidationFailure
from drgym.schemas import UserProfileSchema, UserUpdateSchema

logger = logging.getLogger(__name__)

profile_schema = UserProfileSchema()
user_update_schema = UserUpdateSchema()

UPDATABLE_FIELDS = ("name", "surname", "email", "weight", "height")
EMAIL_TAKEN = {"email": ["Email is already in use"]}


class AccountService:
    def __init__(self, session, user_store, friendship_store, post_store,
                 workout_store, activity_store, reaction_store):
        self.session = session
        self.users = user_store
        self.friendships = friendship_store
        self.posts = post_store
        self.workouts = workout_store
        self.activities = activity_store
        self.reactions = reaction_store

    def get_profile(self, username):
        user = self.users.find_by_username(username)
        return profile_schema.dump(user) if user is not None else None

    def search(self, fragment):
        return self.users.find_by_search(fragment)

    def update_user(self, username, payload):
        """Returns None when the user does not exist."""
        try:
            data = user_update_schema.load(payload)
        except ValidationError as err:
            raise ValidationFailure.from_marshmallow(err) from err

        user = self.users.find_by_username(username)
        if user is None:
            return None

        email = data.get("email")
        if email and email != user.email and self.users.find_by_email(email) is not None:
            raise ValidationFailure(errors=EMAIL_TAKEN)

        for field in UPDATABLE_FIELDS:
            if field in data:
                setattr(user, field, data[field])
        if data.get("password"):
            user.set_password(data["password"])

        try:
            self.users.save(user)
            self.session.commit()
        except IntegrityError as exc:
            # email claimed by another account since the check above
            self.session.rollback()
            raise ValidationFailure(errors=EMAIL_TAKEN) from exc
        except Exception as exc:
            self.session.rollback()
            logger.exception("Failed to update user %s", username)
            raise PersistenceFailure("Failed to update user") from exc

        logger.info("User %s updated", username)
        return profile_schema.dump(user)

    def delete_user(self, username):
        """Removes the user together with everything they own. False when missing."""
        user = self.users.find_by_username(username)
        if user is None:
            return False

        try:
            self.reactions.delete_by_username(username)
            for post in self.posts.find_by_username(username):
                self.reactions.delete_by_post_id(post.id)
                self.posts.delete(post)
            for workout in self.workouts.find_by_username(username):
                self.activities.delete_by_workout_id(workout.id)
                self.workouts.delete(workout)
            self.friendships.delete_for_user(username)
            self.users.delete(user)
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            logger.exception("Failed to delete user %s", username)
            raise PersistenceFailure("Failed to delete user") from exc

        logger.info("User %s deleted", username)
        return True
