import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///folio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Identity provider (Auth0-compatible OpenID Connect)
    AUTH0_DOMAIN = os.environ.get('AUTH0_DOMAIN', '')
    AUTH0_CLIENT_ID = os.environ.get('AUTH0_CLIENT_ID', '')
    AUTH0_CLIENT_SECRET = os.environ.get('AUTH0_CLIENT_SECRET', '')
    AUTH0_SCOPE = os.environ.get('AUTH0_SCOPE', 'openid profile email')
    AUTH0_TIMEOUT = 10
    APP_BASE_URL = os.environ.get('APP_BASE_URL', 'http://localhost:5000')

    # Session gate
    LOGIN_PATH = '/api/auth/login'
    PROTECTED_PATHS = [
        '/dashboard/*',
        '/api/portfolios',
        '/create-portfolio',
        '/edit-portfolio/*',
    ]


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    # sqlite's default pool does not accept pool_size
    SQLALCHEMY_ENGINE_OPTIONS = {} if Config.SQLALCHEMY_DATABASE_URI.startswith('sqlite') else Config.SQLALCHEMY_ENGINE_OPTIONS


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing invalid pool settings like pool_size to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTH0_DOMAIN = 'tenant.example.auth0.com'
    AUTH0_CLIENT_ID = 'test-client'
    AUTH0_CLIENT_SECRET = 'test-secret'
    APP_BASE_URL = 'http://localhost'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
