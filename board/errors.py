"""Domain error kinds and the one place they are turned into HTTP responses."""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException


logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None, fields=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.fields = fields

    def to_dict(self):
        payload = {"error": self.message}
        if self.fields:
            payload["fields"] = self.fields
        return payload


class ValidationError(AppError):
    status_code = 422
    default_message = "Invalid input"


class ConflictError(AppError):
    status_code = 409
    default_message = "Already exists"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class InternalError(AppError):
    pass


def error_response(error: AppError):
    return jsonify(error.to_dict()), error.status_code


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        return error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception("Unhandled error: %s", error)
        return error_response(InternalError())


def register_jwt_handlers(jwt):
    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response(UnauthorizedError("Missing authorization token"))

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response(UnauthorizedError("Invalid token"))

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response(UnauthorizedError("Token has expired"))
