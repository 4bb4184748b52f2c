"""
Centralized Configuration for the Bizabode Operations API
Manages environment-specific settings, database and logging configuration.
"""
import os
from datetime import timedelta


class Config:
    """Base configuration with defaults"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or os.urandom(32).hex()
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max request body

    # CORS Settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    CORS_ALLOW_HEADERS = ['Content-Type', 'Authorization', 'X-Requested-With']

    # Database Settings
    DATABASE_URL = os.environ.get('DATABASE_URL', 'sqlite:///bizabode.db')
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_FILE = os.environ.get('LOG_FILE', 'app.log')
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LOG_TO_FILE = True

    # Environment variables the health check reports on
    REQUIRED_ENV_VARS = ['DATABASE_URL', 'SECRET_KEY']

    # Session Configuration
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    ENV_NAME = 'default'
    SERVICE_NAME = 'bizabode-api'
    VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development-specific configuration"""
    ENV_NAME = 'development'
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGINS = ['*']


class ProductionConfig(Config):
    """Production-specific configuration"""
    ENV_NAME = 'production'
    DEBUG = False
    TESTING = False
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'https://bizabode.example.com').split(',')
    PREFERRED_URL_SCHEME = 'https'
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing-specific configuration"""
    ENV_NAME = 'testing'
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'bizabode-qa-session-signing-key-0a9b8c7d6e5f4'
    DATABASE_URL = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    LOG_TO_FILE = False


# Configuration selector
config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}


def get_config():
    """Get configuration based on FLASK_ENV environment variable"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config_by_name.get(env, DevelopmentConfig)


def get_missing_env_vars(required=None):
    """Return the names of required environment variables that are unset"""
    required = required if required is not None else Config.REQUIRED_ENV_VARS
    return [name for name in required if not os.environ.get(name)]
