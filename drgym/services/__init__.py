"""Per-request service wiring over the Flask-SQLAlchemy session.

Only the token verifier outlives a request: it is built once by the app
factory from configuration and kept in ``app.extensions``.
"""
from flask import current_app

from drgym.extensions import db
from drgym.stores import (
    ActivityStore, ExerciseStore, FriendshipStore, PostStore, ReactionStore, UserStore, WorkoutStore,
)
from .access_guard import AccessGuard, Relation
from .accounts import AccountService
from .assembler import AggregateAssembler, ExerciseNames
from .exercise_stats import ExerciseStats, parse_period
from .friend_graph import FriendGraph
from .post_pipeline import PostWritePipeline
from .reactions import ReactionService
from .token_verifier import Identity, TokenVerifier, Verification, VerificationError

VERIFIER_KEY = "drgym_token_verifier"


def get_token_verifier():
    return current_app.extensions[VERIFIER_KEY]


def get_friend_graph():
    return FriendGraph(FriendshipStore(db.session))


def get_access_guard():
    return AccessGuard(get_friend_graph())


def get_assembler():
    session = db.session
    return AggregateAssembler(PostStore(session), WorkoutStore(session), ActivityStore(session), ExerciseStore(session))


def get_post_pipeline():
    session = db.session
    return PostWritePipeline(
        session,
        get_access_guard(),
        get_assembler(),
        PostStore(session),
        WorkoutStore(session),
        ActivityStore(session),
        ExerciseStore(session),
        ReactionStore(session),
    )


def get_reaction_service():
    return ReactionService(ReactionStore(db.session))


def get_account_service():
    session = db.session
    return AccountService(
        session,
        UserStore(session),
        FriendshipStore(session),
        PostStore(session),
        WorkoutStore(session),
        ActivityStore(session),
        ReactionStore(session),
    )


def get_exercise_stats():
    session = db.session
    return ExerciseStats(WorkoutStore(session), ActivityStore(session), ExerciseStore(session))


__all__ = [
    "AccessGuard", "Relation", "AccountService", "AggregateAssembler", "ExerciseNames",
    "ExerciseStats", "parse_period", "FriendGraph", "PostWritePipeline", "ReactionService",
    "Identity", "TokenVerifier", "Verification", "VerificationError",
    "get_token_verifier", "get_friend_graph", "get_access_guard", "get_assembler", "get_post_pipeline",
    "get_reaction_service", "get_account_service", "get_exercise_stats",
]
