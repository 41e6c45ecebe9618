from flask import Blueprint, jsonify

from drgym.extensions import db
from drgym.schemas import ExerciseSchema
from drgym.stores import ExerciseStore
from drgym.utils.decorators import require_identity

exercises_bp = Blueprint("exercises", __name__)
exercises_schema = ExerciseSchema(many=True)


@exercises_bp.route("", methods=["GET"])
@require_identity
def list_exercises(identity):
    return jsonify(exercises_schema.dump(ExerciseStore(db.session).find_all()))
