"""
API Blueprints Package

All HTTP route handlers for the application, organized by domain.
Each module defines a Flask Blueprint registered in app/__init__.py.

BLUEPRINT REFERENCE:
====================

Inventory:
- items.py       : Items with pagination, low-stock/critical filters, stock adjustment

Procurement:
- suppliers.py   : Supplier directory

CRM:
- leads.py       : Lead capture and pipeline filters

After-sales:
- deliveries.py  : Delivery scheduling, cancel/complete acknowledgements

Health checks (/api/health, /api/ping) live in health_checks.py at the root.
"""

# All blueprints are imported and registered in app/__init__.py
# This file serves as documentation only

__all__ = []
