"""Flask application factory."""

import logging
import os

from flask import Flask
from .config import config
from .errors import AuthMissing, register_error_handlers
from .extensions import get_token_verifier, login_manager


def create_app(config_name=None, **config_overrides):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.config.update(config_overrides)

    if not app.config.get('JWT_SECRET'):
        raise RuntimeError('JWT_SECRET is not set. Set JWT_SECRET in the environment or .env')

    level = app.config['LOG_LEVEL']
    app.logger.setLevel(level)
    logging.getLogger('storefront').setLevel(level)

    # Services
    from .services import (Catalog, CartSnapshotFile, CartStore, TokenVerifier,
                           extract_bearer, generate_products)

    catalog = Catalog(generate_products(app.config['CATALOG_SIZE'], seed=app.config['CATALOG_SEED']))
    app.logger.info('Generated catalog with %d products', len(catalog))

    snapshot = CartSnapshotFile(app.config['CARTS_FILE']) if app.config['CARTS_FILE'] else None
    cart_store = CartStore(catalog, snapshot, max_quantity=app.config['MAX_CART_QUANTITY'])
    cart_store.load()

    tokens = TokenVerifier(app.config['JWT_SECRET'],
                           algorithm=app.config['JWT_ALGORITHM'],
                           expires_minutes=app.config['JWT_EXPIRES_MINUTES'])

    app.extensions['storefront.catalog'] = catalog
    app.extensions['storefront.cart_store'] = cart_store
    app.extensions['storefront.tokens'] = tokens

    # Initialize extensions
    login_manager.init_app(app)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Bearer token authentication for Flask-Login
    @login_manager.request_loader
    def load_user_from_request(request):
        header = request.headers.get('Authorization')
        if not header:
            return None
        return get_token_verifier().verify(extract_bearer(header))

    @login_manager.unauthorized_handler
    def unauthorized():
        raise AuthMissing()

    # Error handlers
    register_error_handlers(app)

    return app
