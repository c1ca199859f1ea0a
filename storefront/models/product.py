"""Product model."""

from dataclasses import dataclass, replace

PUBLIC_FIELDS = (
    'id', 'name', 'description', 'price', 'category',
    'brand', 'stock', 'rating', 'tags', 'createdAt',
)

# Fields a client may set through create/update requests
EDITABLE_FIELDS = ('name', 'description', 'price', 'category', 'brand', 'stock', 'tags')


@dataclass(frozen=True)
class Product:
    """Catalog product. Internal fields never leave the service."""
    id: str
    name: str
    description: str
    price: float
    category: str
    brand: str
    stock: int = 0
    rating: float = 0
    tags: tuple = ()
    created_at: str = ''

    # Internal only
    cost_price: float = 0
    supplier: str = 'Unknown'
    internal_notes: str = ''
    admin_only: bool = False

    def to_public_dict(self):
        """Fields exposed through the public API."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'category': self.category,
            'brand': self.brand,
            'stock': self.stock,
            'rating': self.rating,
            'tags': list(self.tags),
            'createdAt': self.created_at,
        }

    def public_value(self, field_name):
        """Value of a public field by its API name, used as a sort key."""
        return self.to_public_dict()[field_name]

    def with_changes(self, changes):
        """Return a copy with the given editable fields replaced."""
        values = {key: value for key, value in changes.items() if key in EDITABLE_FIELDS}
        if 'tags' in values:
            values['tags'] = tuple(values['tags'])
        return replace(self, **values)

    def __repr__(self):
        return f'<Product {self.id} {self.name}>'
