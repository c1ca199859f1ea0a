"""In-memory product catalog."""

import logging
import math
import random
import threading
from dataclasses import dataclass

from storefront.errors import ProductNotFound, ValidationError
from storefront.models import Product, PUBLIC_FIELDS
from storefront.utils.formatters import utc_now_iso
from storefront.utils.validators import require_product_id

logger = logging.getLogger(__name__)

CATEGORIES = ['Electronics', 'Clothing', 'Books', 'Home', 'Sports', 'Beauty']
BRANDS = ['BrandA', 'BrandB', 'BrandC', 'BrandD', 'BrandE']

DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


def generate_products(count=1000, seed=None):
    """Build the sample catalog served at startup."""
    rng = random.Random(seed)
    created_at = utc_now_iso()
    products = []
    for i in range(1, count + 1):
        products.append(Product(
            id=str(i),
            name=f'Product {i}',
            description=f'This is product number {i} with amazing features',
            price=rng.randint(10, 1009),
            category=rng.choice(CATEGORIES),
            brand=rng.choice(BRANDS),
            stock=rng.randint(0, 99),
            rating=round(rng.random() * 5, 1),
            tags=(f'tag{i}', f'feature{i % 10}'),
            created_at=created_at,
            cost_price=rng.randint(5, 504),
            supplier=f'Supplier {i % 20}',
            internal_notes=f'Internal notes for product {i}',
            admin_only=rng.random() > 0.9,
        ))
    return products


@dataclass
class Page:
    """One page of a product listing."""
    items: list
    total: int
    page: int
    per_page: int

    @property
    def pages(self):
        """Total number of pages."""
        return math.ceil(self.total / self.per_page) if self.per_page else 0

    def to_dict(self):
        return {
            'currentPage': self.page,
            'totalPages': self.pages,
            'totalItems': self.total,
            'itemsPerPage': self.per_page,
        }


class Catalog:
    """Ordered, in-memory product collection.

    Every read and write holds the catalog lock, so a lookup never sees a
    list that a concurrent create, update or delete is halfway through
    changing.
    """

    def __init__(self, products=None):
        self._products = list(products or [])
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._products)

    def _find(self, product_id):
        # Caller holds self._lock
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def _lookup(self, product_id):
        with self._lock:
            index = self._find(product_id)
            return self._products[index] if index != -1 else None

    def get(self, product_id):
        """Return a product by ID."""
        require_product_id(product_id)
        product = self._lookup(product_id)
        if product is None:
            raise ProductNotFound()
        return product

    def exists(self, product_id):
        return self._lookup(product_id) is not None

    def price_of(self, product_id):
        """Current price of a product; products no longer listed cost nothing."""
        product = self._lookup(product_id)
        return product.price if product is not None else 0

    def list(self, search=None, category=None, sort_by='name', sort_order='asc',
             page=1, per_page=DEFAULT_PER_PAGE, max_per_page=MAX_PER_PAGE):
        """Filter, sort and paginate the catalog."""
        sort_by = sort_by or 'name'
        sort_order = (sort_order or 'asc').lower()
        if sort_by not in PUBLIC_FIELDS:
            raise ValidationError(f'Cannot sort by {sort_by!r}',
                                  details=[f'sortBy must be one of: {", ".join(PUBLIC_FIELDS)}'])
        if sort_order not in ('asc', 'desc'):
            raise ValidationError(f'Invalid sort order {sort_order!r}',
                                  details=['sortOrder must be "asc" or "desc"'])

        if page is None or page < 1:
            page = 1
        if per_page is None or per_page < 1:
            per_page = DEFAULT_PER_PAGE
        per_page = min(per_page, max_per_page)

        with self._lock:
            products = list(self._products)

        if search:
            term = search.lower()
            products = [
                p for p in products
                if term in p.name.lower() or term in p.description.lower()
            ]

        if category:
            products = [p for p in products if p.category == category]

        # sorted() is stable in both directions, so ties keep catalog order
        products = sorted(products, key=lambda p: p.public_value(sort_by),
                          reverse=sort_order == 'desc')

        start = (page - 1) * per_page
        return Page(items=products[start:start + per_page],
                    total=len(products),
                    page=page,
                    per_page=per_page)

    def next_id(self):
        if not self._products:
            return '1'
        return str(max(int(p.id) for p in self._products) + 1)

    def create(self, data):
        """Add a product from validated client data."""
        with self._lock:
            product = Product(
                id=self.next_id(),
                name=data['name'],
                description=data['description'],
                price=data['price'],
                category=data['category'],
                brand=data['brand'],
                stock=data.get('stock') or 0,
                rating=0,
                tags=tuple(data.get('tags') or ()),
                created_at=utc_now_iso(),
                cost_price=data['price'] * 0.7,
                supplier='Unknown',
                internal_notes='',
                admin_only=False,
            )
            self._products.append(product)
        logger.info('Created product %s', product.id)
        return product

    def update(self, product_id, changes):
        """Apply validated changes to an existing product."""
        require_product_id(product_id)
        with self._lock:
            index = self._find(product_id)
            if index == -1:
                raise ProductNotFound()
            product = self._products[index].with_changes(changes)
            self._products[index] = product
        logger.info('Updated product %s', product_id)
        return product

    def delete(self, product_id):
        """Remove a product from the catalog."""
        require_product_id(product_id)
        with self._lock:
            index = self._find(product_id)
            if index == -1:
                raise ProductNotFound()
            product = self._products.pop(index)
        logger.info('Deleted product %s', product_id)
        return product
