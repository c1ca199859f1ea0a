# Storefront API - development server
# Configure with a .env file (see .env.example); JWT_SECRET is required.

import logging
import os

from storefront import create_app
from storefront.extensions import get_cart_store

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
)

app = create_app()


if __name__ == '__main__':
    try:
        app.run(host=os.environ.get('HOST', '127.0.0.1'),
                port=int(os.environ.get('PORT', 5000)),
                threaded=True)
    finally:
        with app.app_context():
            get_cart_store().close()
