"""Service routes."""

from flask import Blueprint, jsonify

from storefront.extensions import get_cart_store, get_catalog

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    return jsonify({
        'status': 'ok',
        'products': len(get_catalog()),
        'carts': len(get_cart_store())
    })
