"""
Flask application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os


class Config:
    """Base configuration class with common settings."""

    # Secret key for Flask sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Auth token settings (signed cookie token)
    TOKEN_SECRET = os.environ.get('TOKEN_SECRET') or SECRET_KEY
    TOKEN_COOKIE_NAME = os.environ.get('TOKEN_COOKIE_NAME') or 'token'
    TOKEN_MAX_AGE = int(os.environ.get('TOKEN_MAX_AGE', 7 * 24 * 3600))  # 7 days

    # Flask-Login reads its remember cookie before the token loader; nothing issues it
    REMEMBER_COOKIE_NAME = '_guest_registry_unused_remember'

    # Database configuration
    DATABASE_PATH = os.environ.get('DATABASE_PATH') or 'instance/bookings.db'

    # File upload configuration
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or 'static/uploads'
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))  # 16MB
    ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}

    # Pagination
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    # GRC number generation
    GRC_MAX_RETRIES = 5

    # Timezone
    TIMEZONE = os.environ.get('TIMEZONE') or 'Asia/Kolkata'

    # Application settings
    APP_NAME = 'GuestRegistry'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'true').lower() == 'true'

    SECRET_KEY = os.environ.get('SECRET_KEY') or Config.SECRET_KEY
    TOKEN_SECRET = os.environ.get('TOKEN_SECRET') or SECRET_KEY
    DATABASE_PATH = os.environ.get('DATABASE_PATH') or Config.DATABASE_PATH

    @classmethod
    def validate(cls) -> None:
        """Validate that required production environment variables are set."""
        secret_key = os.environ.get('SECRET_KEY')
        if not secret_key:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        if len(secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters in production")
        token_secret = os.environ.get('TOKEN_SECRET')
        if token_secret is not None and len(token_secret) < 32:
            raise ValueError("TOKEN_SECRET must be at least 32 characters in production")
        if not os.environ.get('DATABASE_PATH'):
            raise ValueError("DATABASE_PATH environment variable must be set in production")


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    DATABASE_PATH = os.environ.get('DATABASE_PATH', 'instance/bookings_test.db')
    SECRET_KEY = 'test-secret-key'
    TOKEN_SECRET = 'test-token-secret'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}
