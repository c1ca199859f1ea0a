import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(key, default=None):
    value = os.environ.get(key)
    if value is None or value.strip() == '':
        return default
    return int(value)


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Bearer tokens. No default secret: create_app refuses to start without one.
    JWT_SECRET = os.environ.get('JWT_SECRET')
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRES_MINUTES = _get_int('JWT_EXPIRES_MINUTES', 60)

    # Cart snapshot, rewritten after every cart change
    basedir = os.path.dirname(os.path.dirname(__file__))
    CARTS_FILE = os.environ.get('CARTS_FILE') or os.path.join(basedir, 'data', 'carts.json')

    # Generated catalog
    CATALOG_SIZE = _get_int('CATALOG_SIZE', 1000)
    CATALOG_SEED = _get_int('CATALOG_SEED')

    # Pagination
    ITEMS_PER_PAGE = 20
    MAX_ITEMS_PER_PAGE = 100

    MAX_CART_QUANTITY = 100

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Forms validate JSON bodies only; there is no browser session to protect
    WTF_CSRF_ENABLED = False


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    JWT_SECRET = 'testing-secret-for-storefront-test-suite'
    CATALOG_SIZE = 50
    CATALOG_SEED = 1234
    CARTS_FILE = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
