"""Shared fixtures for the storefront test suite."""
import pytest

from storefront import create_app
from storefront.models import Product
from storefront.services import Catalog, CartSnapshotFile, CartStore


def make_product(product_id, price, **overrides):
    """Build a catalog product with sensible defaults."""
    values = dict(
        id=str(product_id),
        name=f'Product {product_id}',
        description=f'This is product number {product_id} with amazing features',
        price=price,
        category='Books',
        brand='BrandA',
        stock=10,
        rating=4.0,
        tags=(f'tag{product_id}',),
        created_at='2024-01-01T00:00:00.000Z',
        cost_price=price * 0.5,
        supplier='Supplier 1',
        internal_notes='do not show',
        admin_only=False,
    )
    values.update(overrides)
    return Product(**values)


@pytest.fixture
def catalog():
    """Small catalog with known prices."""
    return Catalog([
        make_product(1, 100),
        make_product(2, 200),
        make_product(3, 150),
        make_product(4, 75),
        make_product(5, 19.5),
    ])


@pytest.fixture
def snapshot(tmp_path):
    return CartSnapshotFile(tmp_path / 'carts.json')


@pytest.fixture
def store(catalog, snapshot):
    return CartStore(catalog, snapshot)


@pytest.fixture
def app(tmp_path):
    """Application wired to a temporary cart snapshot."""
    app = create_app('testing', CARTS_FILE=str(tmp_path / 'carts.json'))
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_token(app):
    """Factory for bearer tokens signed with the app's secret."""
    def _make_token(user_id='user-1', role='customer', **kwargs):
        return app.extensions['storefront.tokens'].issue(user_id, role=role, **kwargs)
    return _make_token


@pytest.fixture
def auth_headers(make_token):
    return {'Authorization': f'Bearer {make_token()}'}


@pytest.fixture
def admin_headers(make_token):
    return {'Authorization': f"Bearer {make_token('admin-1', role='admin')}"}
