from .user import UserProfileSchema, UserUpdateSchema
from .workout import ActivitySchema, ActivityInputSchema, ExerciseSchema, WorkoutSchema, WorkoutInputSchema, PeriodSchema
from .post import PostSchema, PostCreateSchema, PostWithWorkoutSchema, PostUpdateSchema, ReactionSchema

__all__ = [
    "UserProfileSchema", "UserUpdateSchema",
    "ActivitySchema", "ActivityInputSchema", "ExerciseSchema",
    "WorkoutSchema", "WorkoutInputSchema", "PeriodSchema",
    "PostSchema", "PostCreateSchema", "PostWithWorkoutSchema", "PostUpdateSchema",
    "ReactionSchema",
]
