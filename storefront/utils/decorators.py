"""Role-based access decorators."""

from functools import wraps

from flask import current_app
from flask_login import current_user

from storefront.errors import Forbidden
from storefront.utils.validators import require_product_id


def admin_required(f):
    """Decorator to require an authenticated admin."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return current_app.login_manager.unauthorized()
        if not current_user.is_admin():
            raise Forbidden('Admin privileges required')
        return f(*args, **kwargs)
    return decorated_function


def valid_product_id(f):
    """Reject a malformed ``product_id`` URL segment with 400."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        require_product_id(kwargs['product_id'])
        return f(*args, **kwargs)
    return decorated_function
