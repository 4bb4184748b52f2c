"""
Inventory Repository - Database access layer for inventory/stock management.
"""

import logging
from datetime import datetime
from typing import List, Optional, Dict, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import or_

from database.models import InventoryItem, StockMovement

logger = logging.getLogger(__name__)

# API field -> column
ITEM_FIELDS = {
    'sku': 'sku',
    'name': 'name',
    'description': 'description',
    'category': 'category',
    'quantity': 'quantity',
    'reorderLevel': 'reorder_level',
    'unitPrice': 'unit_price',
    'costPrice': 'cost_price',
    'location': 'location',
    'barcode': 'barcode',
    'supplier': 'supplier',
    'imageUrl': 'image_url',
    'critical': 'critical',
    'isActive': 'is_active',
}


class DuplicateSkuError(Exception):
    """Raised when a SKU is already used by another item of the same company."""


class InventoryRepository:
    """Repository for inventory database operations."""

    def __init__(self, session: Session, company_id: str):
        self.session = session
        self.company_id = company_id

    def _base_query(self):
        return self.session.query(InventoryItem).filter(
            InventoryItem.company_id == self.company_id
        )

    def _get(self, item_id: str) -> Optional[InventoryItem]:
        return self._base_query().filter(InventoryItem.id == item_id).first()

    def list_items(self, query) -> Tuple[List[Dict], int]:
        """
        List active items matching a normalized query.

        Recognized filters: search (name/SKU), category, lowStock, critical.
        Returns (items, total) where total ignores pagination.
        """
        q = self._base_query().filter(InventoryItem.is_active == True)

        search = query.get('search')
        if search:
            pattern = f"%{search}%"
            q = q.filter(or_(
                InventoryItem.name.ilike(pattern),
                InventoryItem.sku.ilike(pattern)
            ))
        category = query.get('category')
        if category:
            q = q.filter(InventoryItem.category == category)
        if query.flag('lowStock'):
            q = q.filter(InventoryItem.quantity <= InventoryItem.reorder_level)
        if query.flag('critical'):
            q = q.filter(InventoryItem.critical == True)

        total = q.count()
        items = (q.order_by(InventoryItem.created_at.desc())
                 .offset(query.skip).limit(query.limit).all())
        return [item.to_dict() for item in items], total

    def get_item(self, item_id: str) -> Optional[Dict]:
        """Get an inventory item by ID."""
        item = self._get(item_id)
        return item.to_dict() if item else None

    def get_item_by_sku(self, sku: str) -> Optional[Dict]:
        """Get an inventory item by SKU."""
        item = self._base_query().filter(InventoryItem.sku == sku).first()
        return item.to_dict() if item else None

    def create_item(self, data: Dict) -> Dict:
        """Create a new inventory item."""
        if self.get_item_by_sku(data['sku']):
            raise DuplicateSkuError(f"An item with SKU {data['sku']} already exists")

        item = InventoryItem(company_id=self.company_id)
        for field, column in ITEM_FIELDS.items():
            if field in data:
                setattr(item, column, data[field])
        self.session.add(item)
        self.session.flush()
        logger.info(f"Created inventory item: {item.id}")
        return item.to_dict()

    def update_item(self, item_id: str, data: Dict) -> Optional[Dict]:
        """Update an inventory item."""
        item = self._get(item_id)
        if not item:
            return None

        if 'sku' in data and data['sku'] != item.sku:
            existing = self.get_item_by_sku(data['sku'])
            if existing and existing['id'] != item_id:
                raise DuplicateSkuError(f"An item with SKU {data['sku']} already exists")

        for field, column in ITEM_FIELDS.items():
            if field in data:
                setattr(item, column, data[field])
        item.updated_at = datetime.utcnow()
        self.session.flush()
        logger.info(f"Updated inventory item: {item_id}")
        return item.to_dict()

    def delete_item(self, item_id: str) -> bool:
        """Soft delete an inventory item."""
        item = self._get(item_id)
        if not item:
            return False
        item.is_active = False
        item.updated_at = datetime.utcnow()
        self.session.flush()
        logger.info(f"Deleted (deactivated) inventory item: {item_id}")
        return True

    def adjust_quantity(self, item_id: str, adjustment: int,
                        reason: str = None, performed_by: str = None) -> Optional[Dict]:
        """Adjust inventory quantity (positive or negative) and record the movement."""
        item = self._get(item_id)
        if not item:
            return None

        previous = item.quantity or 0
        item.quantity = max(0, previous + adjustment)
        item.updated_at = datetime.utcnow()

        movement = StockMovement(
            company_id=self.company_id,
            item_id=item.id,
            movement_type='in' if adjustment > 0 else 'out',
            quantity=abs(item.quantity - previous),
            previous_quantity=previous,
            new_quantity=item.quantity,
            reason=reason,
            performed_by=performed_by,
        )
        self.session.add(movement)
        self.session.flush()
        logger.info(f"Adjusted inventory {item_id} by {adjustment}: {reason}")

        result = item.to_dict()
        result['movement'] = movement.to_dict()
        return result
