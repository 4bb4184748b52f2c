"""
Database package for the Bizabode Operations API.
Provides SQLAlchemy models, connection management, and session handling.
"""

from database.connection import (
    Base,
    configure_engine,
    get_engine,
    get_db_session,
    init_db,
    drop_db,
    reset_engine,
    check_db_connection
)

from database.models import (
    User,
    InventoryItem,
    StockMovement,
    Supplier,
    Lead,
    Delivery
)

__all__ = [
    # Connection
    'Base',
    'configure_engine',
    'get_engine',
    'get_db_session',
    'init_db',
    'drop_db',
    'reset_engine',
    'check_db_connection',
    # Models
    'User',
    'InventoryItem',
    'StockMovement',
    'Supplier',
    'Lead',
    'Delivery'
]
