"""
Services package for the Bizabode Operations API.
Contains repository classes for database access.
"""

from services.inventory_repository import InventoryRepository, DuplicateSkuError
from services.supplier_repository import SupplierRepository
from services.lead_repository import LeadRepository
from services.delivery_repository import DeliveryRepository
from services.user_repository import UserRepository, DuplicateEmailError

__all__ = [
    'InventoryRepository',
    'DuplicateSkuError',
    'SupplierRepository',
    'LeadRepository',
    'DeliveryRepository',
    'UserRepository',
    'DuplicateEmailError'
]
