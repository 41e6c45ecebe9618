from .user import User
from .friendship import Friendship
from .exercises import Exercise
from .workout import Workout
from .activity import Activity
from .post import Post
from .post_reaction import PostReaction

__all__ = [
    "User", "Friendship",
    "Exercise", "Workout", "Activity",
    "Post", "PostReaction",
]
