"""Domain models package."""

from .product import Product, PUBLIC_FIELDS, EDITABLE_FIELDS
from .cart import Cart, CartItem
from .user import User

__all__ = [
    'Product',
    'PUBLIC_FIELDS',
    'EDITABLE_FIELDS',
    'Cart',
    'CartItem',
    'User',
]
