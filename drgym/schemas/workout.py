from marshmallow import EXCLUDE, ValidationError, fields, validate, validates_schema

from drgym.extensions import ma


class ExerciseSchema(ma.Schema):
    id = fields.Integer()
    name = fields.String()
    category = fields.String(allow_none=True)
    description = fields.String(allow_none=True)


class ActivitySchema(ma.Schema):
    id = fields.Integer()
    workout_id = fields.Integer()
    exercise_id = fields.Integer()
    exercise_name = fields.String(allow_none=True)
    weight = fields.Float(allow_none=True)
    reps = fields.Integer(allow_none=True)
    duration = fields.Integer(allow_none=True)
    distance = fields.Float(allow_none=True)


class WorkoutSchema(ma.Schema):
    id = fields.Integer()
    username = fields.String()
    start_date = fields.DateTime()
    end_date = fields.DateTime()
    description = fields.String(allow_none=True)
    created_at = fields.DateTime()


class ActivityInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    exercise_id = fields.Integer(required=True, strict=True)
    weight = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))
    reps = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    duration = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=0))
    distance = fields.Float(load_default=None, allow_none=True, validate=validate.Range(min=0))


class WorkoutInputSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    start_date = fields.DateTime(required=True)
    end_date = fields.DateTime(required=True)
    description = fields.String(load_default=None, allow_none=True)
    activities = fields.List(fields.Nested(ActivityInputSchema), load_default=list)

    @validates_schema
    def validate_dates(self, data, **kwargs):
        if data["end_date"] < data["start_date"]:
            raise ValidationError("end_date must not be before start_date", "end_date")


class PeriodSchema(ma.Schema):
    """Query string of the exercise statistics endpoints."""
    class Meta:
        unknown = EXCLUDE

    start_date = fields.Date(required=True, data_key="startDate")
    end_date = fields.Date(required=True, data_key="endDate")

    @validates_schema
    def validate_period(self, data, **kwargs):
        if data["end_date"] < data["start_date"]:
            raise ValidationError("endDate must not be before startDate", "endDate")
