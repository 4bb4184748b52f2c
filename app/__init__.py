"""
Bizabode Operations API - Application Package

This package contains the modular backend structure:
- api/: HTTP route handlers (Flask Blueprints)
- utils/: Query normalization and response envelopes shared by every route

The app factory lives in app_init.py at the project root; data access lives in
the root services/ and database/ packages.
"""

import logging

logger = logging.getLogger(__name__)

from app.api.auth_routes import auth_bp
from app.api.items import items_bp
from app.api.suppliers import suppliers_bp
from app.api.leads import leads_bp
from app.api.deliveries import deliveries_bp

BLUEPRINTS = (
    auth_bp,
    items_bp,
    suppliers_bp,
    leads_bp,
    deliveries_bp,
)


def register_blueprints(app):
    """
    Register all API blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
    logger.info(f"Registered {len(BLUEPRINTS)} API blueprints")


__all__ = ['register_blueprints', 'auth_bp', 'items_bp', 'suppliers_bp', 'leads_bp', 'deliveries_bp']
