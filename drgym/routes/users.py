from flask import Blueprint, jsonify, request

from drgym.errors import NotFound
from drgym.extensions import db
from drgym.services import (
    get_account_service, get_assembler, get_exercise_stats, get_friend_graph, parse_period,
)
from drgym.stores import UserStore
from drgym.utils.decorators import owner_only, owner_or_friend, payload_username, require_identity

users_bp = Blueprint("users", __name__)


@users_bp.route("/<username>", methods=["GET"])
@owner_or_friend()
def get_user(username, identity):
    profile = get_account_service().get_profile(username)
    if profile is None:
        raise NotFound("User not found")
    return jsonify(profile)


@users_bp.route("/search/<search>", methods=["GET"])
@require_identity
def search_users(search, identity):
    return jsonify(get_account_service().search(search))


@users_bp.route("/<username>", methods=["DELETE"])
@owner_only()
def delete_user(username, identity):
    if not get_account_service().delete_user(username):
        raise NotFound("User not found")
    return "", 204


@users_bp.route("/update", methods=["PUT"])
@owner_only(payload_username)
def update_user(identity):
    profile = get_account_service().update_user(identity.subject, request.get_json(silent=True))
    if profile is None:
        raise NotFound("User not found")
    return jsonify({"msg": "User updated successfully", "user": profile})


# ------- workouts & exercise history -------

@users_bp.route("/<username>/workouts", methods=["GET"])
@owner_or_friend()
def get_workouts_for_user(username, identity):
    return jsonify(get_assembler().assemble_workouts_for(username))


@users_bp.route("/<username>/exercises", methods=["GET"])
@owner_or_friend()
def get_user_exercises_in_period(username, identity):
    start, end = parse_period(request.args)
    return jsonify(get_exercise_stats().exercises_in_period(username, start, end))


@users_bp.route("/<username>/daily-exercise-count", methods=["GET"])
@owner_or_friend()
def get_user_daily_exercise_count(username, identity):
    start, end = parse_period(request.args)
    return jsonify(get_exercise_stats().daily_exercise_count(username, start, end))


# ------- friends -------

@users_bp.route("/<username>/friends", methods=["GET"])
@owner_or_friend()
def get_friends(username, identity):
    return jsonify(get_friend_graph().friends_of(username))


@users_bp.route("/<username>/friends/<friend_username>", methods=["POST"])
@owner_only()
def add_friend(username, friend_username, identity):
    if friend_username == username:
        return jsonify({"msg": "You cannot add yourself as a friend"}), 400
    if UserStore(db.session).find_by_username(friend_username) is None:
        raise NotFound("User not found")
    created = get_friend_graph().add_friend(username, friend_username)
    msg = "Friend added successfully" if created else "Already friends"
    return jsonify({"msg": msg}), 201 if created else 200


@users_bp.route("/<username>/friends/<friend_username>", methods=["DELETE"])
@owner_only()
def remove_friend(username, friend_username, identity):
    get_friend_graph().remove_friend(username, friend_username)
    return "", 204
