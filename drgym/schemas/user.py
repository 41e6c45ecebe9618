from marshmallow import EXCLUDE, fields, validate

from drgym.extensions import ma


class UserProfileSchema(ma.Schema):
    username = fields.String()
    name = fields.String()
    surname = fields.String(allow_none=True)
    weight = fields.Float(allow_none=True)
    height = fields.Float(allow_none=True)


class UserUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(required=True)
    name = fields.String(validate=validate.Length(min=1, max=150))
    surname = fields.String(allow_none=True, validate=validate.Length(max=150))
    email = fields.Email()
    password = fields.String(load_only=True, validate=validate.Length(min=8))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=0, min_inclusive=False))
    height = fields.Float(allow_none=True, validate=validate.Range(min=0, min_inclusive=False))
