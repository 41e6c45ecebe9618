"""SQLAlchemy-backed stores, one per collection.

Stores only ``flush``; committing or rolling back is left to the caller that
owns the unit of work.
"""
from sqlalchemy import or_

from drgym.models import Activity, Exercise, Friendship, Post, PostReaction, User, Workout
from drgym.models.friendship import ordered_pair


class SqlStore:
    model = None

    def __init__(self, session):
        self.session = session

    def find_by_id(self, obj_id):
        if obj_id is None:
            return None
        return self.session.get(self.model, obj_id)

    def save(self, obj):
        self.session.add(obj)
        self.session.flush()
        return obj

    def delete(self, obj):
        self.session.delete(obj)
        self.session.flush()

    def delete_by_id(self, obj_id):
        obj = self.find_by_id(obj_id)
        if obj is None:
            return False
        self.delete(obj)
        return True

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()


class UserStore(SqlStore):
    model = User

    def find_by_username(self, username):
        return self.session.query(User).filter_by(username=username).first()

    def find_by_email(self, email):
        return self.session.query(User).filter_by(email=email).first()

    def find_by_search(self, fragment):
        # match the fragment literally, not as a LIKE pattern
        escaped = fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        users = (
            self.session.query(User)
            .filter(User.username.ilike(f"%{escaped}%", escape="\\"))
            .order_by(User.username.asc())
            .all()
        )
        return [user.username for user in users]


class FriendshipStore(SqlStore):
    model = Friendship

    def _pair_query(self, username_a, username_b):
        user_min, user_max = ordered_pair(username_a, username_b)
        return self.session.query(Friendship).filter_by(user_min=user_min, user_max=user_max)

    def exists(self, username_a, username_b):
        return self._pair_query(username_a, username_b).first() is not None

    def insert(self, username_a, username_b):
        user_min, user_max = ordered_pair(username_a, username_b)
        return self.save(Friendship(user_min=user_min, user_max=user_max))

    def delete_pair(self, username_a, username_b):
        deleted = self._pair_query(username_a, username_b).delete(synchronize_session=False)
        self.session.flush()
        return deleted > 0

    def partners_of(self, username):
        rows = (
            self.session.query(Friendship)
            .filter(or_(Friendship.user_min == username, Friendship.user_max == username))
            .all()
        )
        return sorted(row.other(username) for row in rows)

    def delete_for_user(self, username):
        self.session.query(Friendship).filter(
            or_(Friendship.user_min == username, Friendship.user_max == username)
        ).delete(synchronize_session=False)
        self.session.flush()


class ExerciseStore(SqlStore):
    model = Exercise

    def find_all(self):
        return self.session.query(Exercise).order_by(Exercise.name.asc()).all()


class WorkoutStore(SqlStore):
    model = Workout

    def find_by_username(self, username):
        return (
            self.session.query(Workout)
            .filter_by(username=username)
            .order_by(Workout.start_date.desc())
            .all()
        )

    def find_by_username_in_period(self, username, start, end):
        return (
            self.session.query(Workout)
            .filter(Workout.username == username, Workout.start_date >= start, Workout.start_date < end)
            .order_by(Workout.start_date.asc())
            .all()
        )


class ActivityStore(SqlStore):
    model = Activity

    def find_by_workout_id(self, workout_id):
        return (
            self.session.query(Activity)
            .filter_by(workout_id=workout_id)
            .order_by(Activity.id.asc())
            .all()
        )

    def delete_by_workout_id(self, workout_id):
        self.session.query(Activity).filter_by(workout_id=workout_id).delete(synchronize_session=False)
        self.session.flush()


class PostStore(SqlStore):
    model = Post

    def find_by_username(self, username):
        return (
            self.session.query(Post)
            .filter_by(username=username)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )

    def find_by_usernames(self, usernames):
        usernames = list(usernames)
        if not usernames:
            return []
        return (
            self.session.query(Post)
            .filter(Post.username.in_(usernames))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )


class ReactionStore(SqlStore):
    model = PostReaction

    def find_by_post_id(self, post_id):
        return (
            self.session.query(PostReaction)
            .filter_by(post_id=post_id)
            .order_by(PostReaction.created_at.asc(), PostReaction.id.asc())
            .all()
        )

    def find(self, post_id, username):
        return self.session.query(PostReaction).filter_by(post_id=post_id, username=username).first()

    def delete_by_username_and_post_id(self, username, post_id):
        deleted = (
            self.session.query(PostReaction)
            .filter_by(post_id=post_id, username=username)
            .delete(synchronize_session=False)
        )
        self.session.flush()
        return deleted > 0

    def delete_by_post_id(self, post_id):
        self.session.query(PostReaction).filter_by(post_id=post_id).delete(synchronize_session=False)
        self.session.flush()

    def delete_by_username(self, username):
        self.session.query(PostReaction).filter_by(username=username).delete(synchronize_session=False)
        self.session.flush()
