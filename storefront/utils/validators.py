"""Input validators shared by the catalog, the cart store and the routes."""

import re

from storefront.errors import InvalidIdentifier, InvalidQuantity

PRODUCT_ID_PATTERN = re.compile(r'^[1-9][0-9]*$')


def is_valid_product_id(value):
    """Return True for positive integer strings without a leading zero."""
    return isinstance(value, str) and PRODUCT_ID_PATTERN.fullmatch(value) is not None


def require_product_id(value):
    """Return ``value`` if it is a well formed product ID, else raise."""
    if not is_valid_product_id(value):
        raise InvalidIdentifier()
    return value


def is_valid_quantity(value, maximum=100):
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 1 <= value <= maximum


def coerce_product_id(value):
    """Normalize a product ID taken from a JSON body or a query string.

    JSON clients may send the ID as a number; positive integers are turned
    into their decimal string so that they go through the same pattern check
    as string IDs.
    """
    if value is None or value == '':
        raise InvalidIdentifier('Product ID is required')
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return require_product_id(value)


def coerce_quantity(value, default=1):
    """Normalize a requested quantity; a missing quantity means ``default``."""
    if value is None:
        return default
    if isinstance(value, bool):
        raise InvalidQuantity()
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r'-?[0-9]+', value.strip()):
        return int(value)
    raise InvalidQuantity()
