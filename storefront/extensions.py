"""Extension instances and accessors for per-app services."""

from flask import current_app
from flask_login import LoginManager

login_manager = LoginManager()


def get_catalog():
    return current_app.extensions['storefront.catalog']


def get_cart_store():
    return current_app.extensions['storefront.cart_store']


def get_token_verifier():
    return current_app.extensions['storefront.tokens']
