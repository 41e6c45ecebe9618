import logging

from flask import jsonify
from marshmallow import ValidationError

logger = logging.getLogger(__name__)


class DrGymError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.errors = errors

    def to_dict(self):
        body = {"msg": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class Unauthorized(DrGymError):
    """No, invalid or expired credential, or caller is neither owner nor friend."""
    status_code = 401
    message = "Unauthorized"


class NotFound(DrGymError):
    status_code = 404
    message = "Not found"


class ValidationFailure(DrGymError):
    status_code = 400
    message = "Invalid payload"

    @classmethod
    def from_marshmallow(cls, err):
        return cls(errors=err.messages)


class PersistenceFailure(DrGymError):
    """A store write failed. The caller only ever sees the generic message."""
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(DrGymError)
    def handle_drgym_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        failure = ValidationFailure.from_marshmallow(error)
        return jsonify(failure.to_dict()), failure.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({"msg": NotFound.message}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({"msg": "Method not allowed"}), 405

    @app.errorhandler(500)
    def handle_server_error(error):
        logger.exception("Unhandled error: %s", getattr(error, "original_exception", error))
        return jsonify({"msg": DrGymError.message}), 500
