"""Product catalog routes."""

from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required

from storefront.errors import ValidationError
from storefront.extensions import get_catalog
from storefront.forms import ProductCreateForm, ProductUpdateForm
from storefront.utils.decorators import admin_required, valid_product_id
from storefront.utils.requests import json_body

products_bp = Blueprint('products', __name__)


@products_bp.route('', methods=['GET'])
def list_products():
    """List products with search, category filter, sorting and pagination."""
    page = request.args.get('page', 1, type=int)
    limit = request.args.get('limit', current_app.config['ITEMS_PER_PAGE'], type=int)

    pagination = get_catalog().list(
        search=request.args.get('search', ''),
        category=request.args.get('category', ''),
        sort_by=request.args.get('sortBy', 'name'),
        sort_order=request.args.get('sortOrder', 'asc'),
        page=page,
        per_page=limit,
        max_per_page=current_app.config['MAX_ITEMS_PER_PAGE'],
    )

    response = jsonify({
        'products': [p.to_public_dict() for p in pagination.items],
        'pagination': pagination.to_dict()
    })
    response.headers['X-Total-Count'] = str(pagination.total)
    return response


@products_bp.route('/<product_id>', methods=['GET'])
def get_product(product_id):
    """Single product, public fields only."""
    product = get_catalog().get(product_id)
    return jsonify(product.to_public_dict())


@products_bp.route('', methods=['POST'])
@login_required
def create_product():
    """Create a product."""
    form = ProductCreateForm(json_body())
    if not form.validate():
        raise ValidationError(details=form.error_details())

    product = get_catalog().create(form.data)
    return jsonify({
        'message': 'Product created successfully',
        'product': product.to_public_dict()
    }), 201


@products_bp.route('/<product_id>', methods=['PUT'])
@login_required
def update_product(product_id):
    """Update some fields of a product."""
    catalog = get_catalog()
    catalog.get(product_id)

    form = ProductUpdateForm(json_body())
    if not form.validate():
        raise ValidationError(details=form.error_details())

    product = catalog.update(product_id, form.supplied_data())
    return jsonify({
        'message': 'Product updated successfully',
        'product': product.to_public_dict()
    })


@products_bp.route('/<product_id>', methods=['DELETE'])
@login_required
@valid_product_id
@admin_required
def delete_product(product_id):
    """Delete a product. Admins only."""
    get_catalog().delete(product_id)
    return jsonify({'message': 'Product deleted successfully'})
