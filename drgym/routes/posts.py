from flask import Blueprint, jsonify, request

from drgym.errors import NotFound, Unauthorized
from drgym.extensions import db
from drgym.services import (
    get_access_guard, get_assembler, get_friend_graph, get_post_pipeline, get_reaction_service,
)
from drgym.stores import PostStore
from drgym.utils.decorators import (
    current_verification, owner_only, owner_or_friend, query_username,
)

posts_bp = Blueprint("posts", __name__)


def visible_post(post_id):
    """The post if the caller is its author or the author's friend.

    A post the caller may not see is reported exactly like a missing one.
    """
    verification = current_verification()
    if not verification.ok:
        raise Unauthorized()
    post = PostStore(db.session).find_by_id(post_id)
    if post is None or not get_access_guard().authorize_owner_or_friend(verification, post.username):
        raise NotFound("Post not found")
    return post


# =========================================================
# Reads
# =========================================================

@posts_bp.route("/<int:post_id>", methods=["GET"])
def get_post(post_id):
    post = visible_post(post_id)
    return jsonify(get_assembler().enrich_post(post))


@posts_bp.route("/user/<username>", methods=["GET"])
@owner_or_friend()
def get_user_posts(username, identity):
    return jsonify(get_assembler().assemble_posts_for({username}))


@posts_bp.route("/feed/<username>", methods=["GET"])
@owner_only()
def get_feed(username, identity):
    usernames = set(get_friend_graph().friends_of(username))
    usernames.add(username)
    return jsonify(get_assembler().assemble_posts_for(usernames))


# =========================================================
# Writes
# =========================================================

@posts_bp.route("/create", methods=["POST"])
def create_post():
    result = get_post_pipeline().create_post(current_verification(), request.get_json(silent=True))
    return jsonify(result), 201


@posts_bp.route("/create_with_workout", methods=["POST"])
def create_post_with_workout():
    result = get_post_pipeline().create_post_with_workout(current_verification(), request.get_json(silent=True))
    return jsonify(result), 201


@posts_bp.route("/<int:post_id>", methods=["PUT"])
def update_post(post_id):
    post = get_post_pipeline().update_post(current_verification(), post_id, request.get_json(silent=True))
    return jsonify({"msg": "Post updated successfully", "post": post})


@posts_bp.route("/<int:post_id>", methods=["DELETE"])
def delete_post(post_id):
    get_post_pipeline().delete_post(current_verification(), post_id)
    return "", 204


# =========================================================
# Reactions
# =========================================================

@posts_bp.route("/<int:post_id>/reactions", methods=["GET"])
def get_reactions(post_id):
    visible_post(post_id)
    return jsonify(get_reaction_service().list_for_post(post_id))


@posts_bp.route("/<int:post_id>/reactions", methods=["POST"])
@owner_only(query_username)
def add_reaction(post_id, identity):
    visible_post(post_id)
    get_reaction_service().add(post_id, identity.subject)
    return jsonify({"msg": "Reaction added successfully."}), 200


@posts_bp.route("/<int:post_id>/reactions", methods=["DELETE"])
@owner_only(query_username)
def delete_reaction(post_id, identity):
    get_reaction_service().remove(post_id, identity.subject)
    return "", 204
