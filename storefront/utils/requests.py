"""Request parsing helpers."""

from flask import request

from storefront.errors import ValidationError


def json_body():
    """Return the request body as a dict or reject the request."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data
