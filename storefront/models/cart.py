"""Cart models."""

from dataclasses import dataclass, field

from storefront.utils.validators import is_valid_product_id, is_valid_quantity


@dataclass
class CartItem:
    """A product line in a cart. Prices are looked up, never stored."""
    product_id: str
    quantity: int
    added_at: str

    def subtotal(self, price_of):
        """Calculate subtotal for this item at the current catalog price."""
        return price_of(self.product_id) * self.quantity

    def to_dict(self):
        return {
            'productId': self.product_id,
            'quantity': self.quantity,
            'addedAt': self.added_at,
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild a saved item. Raises ValueError if it breaks the cart rules."""
        product_id = data['productId']
        quantity = data['quantity']
        if not is_valid_product_id(product_id):
            raise ValueError(f'invalid product ID {product_id!r}')
        if not is_valid_quantity(quantity):
            raise ValueError(f'invalid quantity {quantity!r} for product {product_id}')
        return cls(
            product_id=product_id,
            quantity=quantity,
            added_at=data.get('addedAt', ''),
        )

    def __repr__(self):
        return f'<CartItem {self.product_id} x {self.quantity}>'


@dataclass
class Cart:
    """Shopping cart owned by one subject."""
    items: list = field(default_factory=list)
    total: float = 0

    def find(self, product_id):
        """Index of the item for ``product_id`` or -1."""
        for index, item in enumerate(self.items):
            if item.product_id == product_id:
                return index
        return -1

    def recalculate(self, price_of):
        """Recompute the total from current catalog prices."""
        self.total = sum(item.subtotal(price_of) for item in self.items)
        return self.total

    @property
    def item_count(self):
        return len(self.items)

    def copy(self):
        return Cart(
            items=[CartItem(i.product_id, i.quantity, i.added_at) for i in self.items],
            total=self.total,
        )

    def to_dict(self):
        return {
            'items': [item.to_dict() for item in self.items],
            'total': self.total,
        }

    @classmethod
    def from_dict(cls, data):
        items = [CartItem.from_dict(item) for item in data.get('items', [])]
        product_ids = [item.product_id for item in items]
        if len(set(product_ids)) != len(product_ids):
            raise ValueError('duplicate product lines in cart')
        return cls(items=items, total=data.get('total', 0))
