from marshmallow import EXCLUDE, fields, validate

from drgym.extensions import ma
from .workout import WorkoutInputSchema


class PostSchema(ma.Schema):
    id = fields.Integer()
    username = fields.String()
    title = fields.String()
    content = fields.String(allow_none=True)
    created_at = fields.DateTime()


class ReactionSchema(ma.Schema):
    post_id = fields.Integer()
    username = fields.String()
    created_at = fields.DateTime()


class PostCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=150))
    content = fields.String(load_default="", allow_none=True)
    workout_id = fields.Integer(load_default=None, allow_none=True)


class PostWithWorkoutSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True)
    title = fields.String(required=True, validate=validate.Length(min=1, max=150))
    content = fields.String(load_default="", allow_none=True)
    workout = fields.Nested(WorkoutInputSchema, load_default=None, allow_none=True)


class PostUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1, max=150))
    content = fields.String(load_default="", allow_none=True)
    workout_id = fields.Integer(load_default=None, allow_none=True)
