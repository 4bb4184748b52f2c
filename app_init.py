"""
Application Initialization Module
Initializes the Flask app with configuration, logging, security, database and routes
"""
import os
from flask import Flask
from config import get_config
from logging_config import setup_logging
from security import setup_security
from health_checks import register_health_checks
from database import configure_engine, init_db
from app import register_blueprints
import logging

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    """
    Application factory that creates and configures the Flask app

    Args:
        config_class: Configuration class; defaults to the one selected by FLASK_ENV

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    app.config.from_object(config_class or get_config())

    setup_logging(app)

    logger.info("=" * 60)
    logger.info("🚀 Initializing Bizabode Operations API")
    logger.info("=" * 60)
    logger.info(f"Environment: {os.environ.get('FLASK_ENV', 'development')}")
    logger.info(f"Debug mode: {app.debug}")

    # CORS, headers, error handlers
    setup_security(app, app.config)

    initialize_database(app)

    register_blueprints(app)
    register_health_checks(app)

    logger.info("✅ Application initialization complete")
    logger.info("=" * 60)

    return app


def initialize_database(app):
    """
    Configure the engine and create missing tables. A database that is down
    at startup is logged, not fatal; /api/health reports it.

    Args:
        app: Flask application instance
    """
    configure_engine(app.config['DATABASE_URL'], **app.config.get('SQLALCHEMY_ENGINE_OPTIONS', {}))
    try:
        init_db()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
