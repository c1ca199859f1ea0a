"""API exceptions and JSON error handlers."""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class APIError(Exception):
    """Base class for errors that map to a JSON error response."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.details = details or []

    def to_dict(self):
        """Serialize the error for the response body."""
        body = {'error': self.message}
        if self.details:
            body['details'] = list(self.details)
        return body


class AuthMissing(APIError):
    status_code = 401
    message = 'Authentication required'


class AuthInvalid(APIError):
    status_code = 403
    message = 'Invalid or expired token'


class ValidationError(APIError):
    status_code = 400
    message = 'Invalid input'


class InvalidIdentifier(ValidationError):
    message = 'Invalid product ID'


class InvalidQuantity(ValidationError):
    message = 'Quantity must be an integer between 1 and 100'


class NotFound(APIError):
    status_code = 404
    message = 'Not found'


class ProductNotFound(NotFound):
    message = 'Product not found'


class ItemNotFound(NotFound):
    message = 'Item not found in cart'


class Forbidden(APIError):
    status_code = 403
    message = 'Access denied'


class InternalError(APIError):
    pass


def register_error_handlers(app):
    """Map every failure to a JSON body with a stable ``error`` field."""

    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception('Unhandled error: %s', error)
        return jsonify(InternalError().to_dict()), 500
