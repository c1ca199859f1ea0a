"""Catalog, cart and credential services."""

from .catalog import Catalog, Page, generate_products
from .cart_store import CartStore
from .persistence import CartSnapshotFile
from .tokens import TokenVerifier, extract_bearer

__all__ = [
    'Catalog',
    'Page',
    'generate_products',
    'CartStore',
    'CartSnapshotFile',
    'TokenVerifier',
    'extract_bearer',
]
