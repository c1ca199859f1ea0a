"""Cart routes."""

from flask import Blueprint, jsonify, request
from flask_login import current_user, login_required

from storefront.extensions import get_cart_store
from storefront.utils.formatters import utc_now_iso
from storefront.utils.requests import json_body
from storefront.utils.validators import coerce_product_id, coerce_quantity

cart_bp = Blueprint('cart', __name__)


@cart_bp.route('', methods=['GET'])
@login_required
def view_cart():
    """View shopping cart."""
    cart = get_cart_store().get_cart(current_user.id)

    response = jsonify({
        'cart': cart.to_dict(),
        'metadata': {
            'lastUpdated': utc_now_iso(),
            'itemCount': cart.item_count
        }
    })
    response.headers['X-Cart-Items'] = str(cart.item_count)
    return response


@cart_bp.route('', methods=['POST'])
@login_required
def add_to_cart():
    """Add product to cart."""
    data = json_body()
    product_id = coerce_product_id(data.get('productId'))
    quantity = coerce_quantity(data.get('quantity'))

    cart = get_cart_store().add_item(current_user.id, product_id, quantity)
    return jsonify({'message': 'Item added to cart', 'cart': cart.to_dict()})


@cart_bp.route('', methods=['PUT'])
@login_required
def update_cart():
    """Set the quantity of an item already in the cart."""
    data = json_body()
    product_id = coerce_product_id(data.get('productId'))
    quantity = coerce_quantity(data.get('quantity'), default=None)

    cart = get_cart_store().update_item(current_user.id, product_id, quantity)
    return jsonify({'message': 'Cart item updated', 'cart': cart.to_dict()})


@cart_bp.route('', methods=['DELETE'])
@login_required
def remove_from_cart():
    """Remove item from cart."""
    product_id = coerce_product_id(request.args.get('productId'))

    cart, removed = get_cart_store().remove_item(current_user.id, product_id)
    return jsonify({
        'message': 'Item removed from cart',
        'cart': cart.to_dict(),
        'removedItem': removed.to_dict()
    })


@cart_bp.route('/clear', methods=['POST'])
@login_required
def clear_cart():
    """Clear all items from cart."""
    cart = get_cart_store().clear(current_user.id)
    return jsonify({'message': 'Cart cleared', 'cart': cart.to_dict()})
