"""
Recipe Features Configuration

Flask, database, metadata endpoint and logging settings, one class per
environment. FLASK_ENV picks the class.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Settings shared by every environment."""

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Key-value store database; relative SQLite files live next to the app
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'recipe_features.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Request limits
    MAX_CONTENT_LENGTH = 2 * 1024 * 1024  # 2MB, enough for recipe HTML
    MAX_INGREDIENT_LINES = 200

    # Host endpoint serving saved-recipe metadata; empty disables refreshes
    RECIPE_METADATA_URL = os.environ.get('RECIPE_METADATA_URL', '')
    METADATA_TIMEOUT = float(os.environ.get('METADATA_TIMEOUT', '10'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Local development: debug on, verbose logs."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Hosted deployment."""
    DEBUG = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """In-memory database, no outbound requests."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RECIPE_METADATA_URL = ''


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Configuration class for env, or for FLASK_ENV when env is None."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
