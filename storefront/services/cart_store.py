"""Per-user carts held in memory and written through to a snapshot file."""

import logging
import threading

from storefront.errors import InvalidQuantity, ItemNotFound, ProductNotFound
from storefront.models import Cart, CartItem
from storefront.utils.formatters import utc_now_iso
from storefront.utils.validators import is_valid_quantity, require_product_id

logger = logging.getLogger(__name__)

MAX_QUANTITY = 100


class CartStore:
    """Owns every cart, keyed by subject identity.

    Each mutation runs under a single lock that covers the change, the total
    recalculation and the snapshot write, so concurrent requests for the
    same cart are applied one after another and the file always matches a
    state the store was actually in.
    """

    def __init__(self, catalog, snapshot=None, max_quantity=MAX_QUANTITY):
        self._catalog = catalog
        self._snapshot = snapshot
        self.max_quantity = max_quantity
        self._carts = {}
        self._lock = threading.RLock()

    def load(self):
        """Replace the in-memory state with the saved snapshot."""
        entries = self._snapshot.load() if self._snapshot else []
        with self._lock:
            self._carts = dict(entries)
        return len(self._carts)

    def __len__(self):
        return len(self._carts)

    def snapshot(self):
        """Current state as ordered ``(uid, Cart)`` pairs."""
        with self._lock:
            return [(uid, cart.copy()) for uid, cart in self._carts.items()]

    def _persist(self):
        if self._snapshot is not None:
            self._snapshot.save(self._carts.items())

    def get_cart(self, uid):
        """Return the user's cart priced at current catalog prices."""
        with self._lock:
            cart = self._carts.get(uid)
            cart = cart.copy() if cart else Cart()
        cart.recalculate(self._catalog.price_of)
        return cart

    def add_item(self, uid, product_id, quantity=1):
        """Add ``quantity`` of a product, merging with an existing line."""
        require_product_id(product_id)
        if not self._catalog.exists(product_id):
            raise ProductNotFound()
        self._check_quantity(quantity)

        with self._lock:
            cart = self._carts.get(uid) or Cart()
            index = cart.find(product_id)
            if index != -1:
                item = cart.items[index]
                item.quantity = min(item.quantity + quantity, self.max_quantity)
            else:
                cart.items.append(CartItem(product_id, quantity, utc_now_iso()))
            cart.recalculate(self._catalog.price_of)
            self._carts[uid] = cart
            self._persist()
            logger.debug('Cart %s: added %s x %d', uid, product_id, quantity)
            return cart.copy()

    def update_item(self, uid, product_id, quantity):
        """Set the quantity of a product already in the cart."""
        require_product_id(product_id)
        self._check_quantity(quantity)

        with self._lock:
            cart = self._carts.get(uid)
            index = cart.find(product_id) if cart else -1
            if index == -1:
                raise ItemNotFound()
            cart.items[index].quantity = quantity
            cart.recalculate(self._catalog.price_of)
            self._persist()
            logger.debug('Cart %s: set %s to %d', uid, product_id, quantity)
            return cart.copy()

    def remove_item(self, uid, product_id):
        """Remove a product line. Returns the updated cart and the removed item."""
        require_product_id(product_id)

        with self._lock:
            cart = self._carts.get(uid)
            index = cart.find(product_id) if cart else -1
            if index == -1:
                raise ItemNotFound()
            removed = cart.items.pop(index)
            cart.recalculate(self._catalog.price_of)
            self._persist()
            logger.debug('Cart %s: removed %s', uid, product_id)
            return cart.copy(), removed

    def clear(self, uid):
        """Empty the user's cart."""
        with self._lock:
            if self._carts.pop(uid, None) is not None:
                self._persist()
                logger.debug('Cart %s: cleared', uid)
        return Cart()

    def close(self):
        """Flush the current state on shutdown."""
        with self._lock:
            self._persist()

    def _check_quantity(self, quantity):
        if not is_valid_quantity(quantity, self.max_quantity):
            raise InvalidQuantity(
                f'Quantity must be an integer between 1 and {self.max_quantity}')
