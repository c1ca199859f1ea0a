"""HTTP tests for the product catalog endpoints."""
import pytest

from storefront import create_app
from storefront.models import PUBLIC_FIELDS

NEW_PRODUCT = {
    'name': 'Trail Running Shoes',
    'description': 'Light shoes with a grippy sole',
    'price': 89.99,
    'category': 'Sports',
    'brand': 'BrandB',
    'stock': 12,
    'tags': ['running', 'outdoor'],
}


class TestListProducts:

    def test_defaults(self, client):
        response = client.get('/products')

        assert response.status_code == 200
        data = response.get_json()
        assert len(data['products']) == 20
        assert data['pagination'] == {
            'currentPage': 1,
            'totalPages': 3,
            'totalItems': 50,
            'itemsPerPage': 20,
        }
        assert response.headers['X-Total-Count'] == '50'

    def test_only_public_fields(self, client):
        product = client.get('/products?limit=1').get_json()['products'][0]
        assert set(product) == set(PUBLIC_FIELDS)

    def test_bad_paging_values_fall_back(self, client):
        data = client.get('/products?page=abc&limit=-4').get_json()

        assert data['pagination']['currentPage'] == 1
        assert data['pagination']['itemsPerPage'] == 20

    def test_limit_is_capped(self, client):
        data = client.get('/products?limit=1000').get_json()

        assert data['pagination']['itemsPerPage'] == 100
        assert len(data['products']) == 50

    def test_page_past_the_end_is_empty(self, client):
        response = client.get('/products?page=9')

        assert response.status_code == 200
        assert response.get_json()['products'] == []

    def test_search(self, client):
        data = client.get('/products?search=product%2042').get_json()
        assert [p['id'] for p in data['products']] == ['42']

    def test_category_filter(self, client):
        data = client.get('/products?category=Books&limit=100').get_json()

        assert all(p['category'] == 'Books' for p in data['products'])
        assert data['pagination']['totalItems'] == len(data['products'])

    def test_sort_by_price_desc(self, client):
        prices = [p['price'] for p in client.get('/products?sortBy=price&sortOrder=desc&limit=100').get_json()['products']]
        assert prices == sorted(prices, reverse=True)

    def test_sorting_by_internal_field_is_rejected(self, client):
        response = client.get('/products?sortBy=costPrice')

        assert response.status_code == 400
        assert 'details' in response.get_json()


class TestGetProduct:

    def test_returns_public_fields(self, client):
        response = client.get('/products/7')

        assert response.status_code == 200
        data = response.get_json()
        assert data['id'] == '7'
        assert set(data) == set(PUBLIC_FIELDS)

    @pytest.mark.parametrize('product_id', ['0', '01', 'abc', '%3Cscript%3E'])
    def test_malformed_id_is_400(self, client, product_id):
        response = client.get(f'/products/{product_id}')

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Invalid product ID'}

    def test_missing_is_404(self, client):
        assert client.get('/products/999').status_code == 404


class TestCreateProduct:

    def test_requires_auth(self, client):
        assert client.post('/products', json=NEW_PRODUCT).status_code == 401

    def test_creates_with_next_id(self, client, auth_headers):
        response = client.post('/products', json=NEW_PRODUCT, headers=auth_headers)

        assert response.status_code == 201
        data = response.get_json()
        assert data['message'] == 'Product created successfully'
        product = data['product']
        assert product['id'] == '51'
        assert product['price'] == 89.99
        assert product['tags'] == ['running', 'outdoor']
        assert product['rating'] == 0
        assert 'costPrice' not in product

        assert client.get('/products/51').get_json()['name'] == NEW_PRODUCT['name']

    def test_optional_fields_default(self, client, auth_headers):
        body = {k: v for k, v in NEW_PRODUCT.items() if k not in ('stock', 'tags')}

        product = client.post('/products', json=body, headers=auth_headers).get_json()['product']

        assert product['stock'] == 0
        assert product['tags'] == []

    def test_missing_required_fields(self, client, auth_headers):
        response = client.post('/products', json={'name': 'X'}, headers=auth_headers)

        assert response.status_code == 400
        data = response.get_json()
        assert data['error'] == 'Invalid input'
        fields = {detail.split(':')[0] for detail in data['details']}
        assert {'name', 'description', 'price', 'category', 'brand'} <= fields

    @pytest.mark.parametrize('field, value', [
        ('price', -5),
        ('price', 0),
        ('price', 'cheap'),
        ('stock', -1),
        ('stock', 2.5),
        ('name', 42),
        ('tags', [1, 2]),
        ('description', 'tiny'),
    ])
    def test_invalid_values(self, client, auth_headers, field, value):
        body = dict(NEW_PRODUCT, **{field: value})

        response = client.post('/products', json=body, headers=auth_headers)

        assert response.status_code == 400
        assert any(d.startswith(f'{field}:') for d in response.get_json()['details'])

    @pytest.mark.parametrize('field, value, message', [
        ('name', ['Good name', 'x'], 'Must be a single value, not a list'),
        ('price', [5, -1], 'Must be a single value, not a list'),
        ('stock', [3], 'Must be a single value, not a list'),
        ('tags', 'single', 'Must be a list of strings'),
    ])
    def test_value_shape_is_checked(self, client, auth_headers, field, value, message):
        body = dict(NEW_PRODUCT, **{field: value})

        response = client.post('/products', json=body, headers=auth_headers)

        assert response.status_code == 400
        assert f'{field}: {message}' in response.get_json()['details']
        assert client.get('/products/51').status_code == 404

    def test_unknown_fields_are_rejected(self, client, auth_headers):
        body = dict(NEW_PRODUCT, costPrice=1)

        response = client.post('/products', json=body, headers=auth_headers)

        assert response.status_code == 400
        assert 'costPrice: field is not allowed' in response.get_json()['details']


class TestUpdateProduct:

    def test_partial_update(self, client, auth_headers):
        before = client.get('/products/3').get_json()

        response = client.put('/products/3', json={'price': 55, 'stock': 0}, headers=auth_headers)

        assert response.status_code == 200
        product = response.get_json()['product']
        assert product['price'] == 55
        assert product['stock'] == 0
        assert product['name'] == before['name']
        assert product['createdAt'] == before['createdAt']

    def test_tags_can_be_emptied(self, client, auth_headers):
        response = client.put('/products/3', json={'tags': []}, headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()['product']['tags'] == []

    def test_requires_auth(self, client):
        assert client.put('/products/3', json={'price': 5}).status_code == 401

    def test_missing_is_404(self, client, auth_headers):
        assert client.put('/products/999', json={'price': 5}, headers=auth_headers).status_code == 404

    @pytest.mark.parametrize('body', [
        {'name': 'X'},
        {'name': ''},
        {'price': None},
        {'stock': -3},
        {'price': [5, -1]},
        {'tags': 'single'},
    ])
    def test_invalid_value_is_400(self, client, auth_headers, body):
        response = client.put('/products/3', json=body, headers=auth_headers)
        assert response.status_code == 400


class TestDeleteProduct:

    def test_requires_auth(self, client):
        assert client.delete('/products/3').status_code == 401

    def test_requires_admin(self, client, auth_headers):
        response = client.delete('/products/3', headers=auth_headers)

        assert response.status_code == 403
        assert client.get('/products/3').status_code == 200

    def test_admin_can_delete(self, client, admin_headers):
        response = client.delete('/products/3', headers=admin_headers)

        assert response.status_code == 200
        assert response.get_json() == {'message': 'Product deleted successfully'}
        assert client.get('/products/3').status_code == 404

    def test_malformed_id_is_400(self, client, admin_headers):
        assert client.delete('/products/03', headers=admin_headers).status_code == 400

    def test_missing_is_404(self, client, admin_headers):
        assert client.delete('/products/999', headers=admin_headers).status_code == 404

    @pytest.mark.parametrize('product_id', ['abc', '0', '03'])
    def test_malformed_id_is_400_before_role_check(self, client, auth_headers, product_id):
        response = client.delete(f'/products/{product_id}', headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Invalid product ID'}

    def test_malformed_id_without_token_is_401(self, client):
        assert client.delete('/products/abc').status_code == 401


class TestServiceRoutes:

    def test_health(self, client):
        assert client.get('/health').get_json() == {'status': 'ok', 'products': 50, 'carts': 0}

    def test_unknown_route_is_json_404(self, client):
        response = client.get('/nope')

        assert response.status_code == 404
        assert 'error' in response.get_json()

    def test_wrong_method_is_json_405(self, client):
        response = client.patch('/products')

        assert response.status_code == 405
        assert 'error' in response.get_json()


class TestAppFactory:

    def test_secret_is_required(self, tmp_path):
        with pytest.raises(RuntimeError):
            create_app('testing', JWT_SECRET=None, CARTS_FILE=str(tmp_path / 'carts.json'))

    def test_existing_snapshot_is_loaded(self, tmp_path):
        carts_file = tmp_path / 'carts.json'
        carts_file.write_text(
            '[["u1", {"items": [{"productId": "1", "quantity": 2, "addedAt": "x"}], "total": 0}]]',
            encoding='utf-8')

        app = create_app('testing', CARTS_FILE=str(carts_file))

        assert len(app.extensions['storefront.cart_store']) == 1
