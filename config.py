"""
Application Configuration

Centralizes Flask settings and the ingredient scaling options.
"""

import os

from constants import MAX_LENGTHS, MAX_SCALE, MIN_SCALE, SCALE_PRESETS


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Display style for amounts: 'unicode' (½) or 'ascii' (1/2)
    FRACTION_STYLE = os.environ.get('FRACTION_STYLE', 'unicode')

    # Scale factor bounds and quick-select presets
    MIN_SCALE = MIN_SCALE
    MAX_SCALE = MAX_SCALE
    SCALE_PRESETS = SCALE_PRESETS

    # Input limits
    MAX_INGREDIENT_LENGTH = MAX_LENGTHS['ingredient_text']
    MAX_INGREDIENT_LINES = MAX_LENGTHS['ingredient_lines']

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    FRACTION_STYLE = 'unicode'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
