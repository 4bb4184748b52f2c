"""
Supplier Repository - Database access layer for procurement suppliers.
"""

import logging
from datetime import datetime
from typing import List, Optional, Dict, Tuple
from sqlalchemy.orm import Session

from database.models import Supplier

logger = logging.getLogger(__name__)

SUPPLIER_FIELDS = {
    'name': 'name',
    'email': 'email',
    'phone': 'phone',
    'address': 'address',
    'contactPerson': 'contact_person',
    'taxId': 'tax_id',
    'paymentTerms': 'payment_terms',
    'notes': 'notes',
    'isActive': 'is_active',
}


class SupplierRepository:
    """Repository for supplier database operations."""

    def __init__(self, session: Session, company_id: str):
        self.session = session
        self.company_id = company_id

    def _get(self, supplier_id: str) -> Optional[Supplier]:
        return self.session.query(Supplier).filter(
            Supplier.id == supplier_id,
            Supplier.company_id == self.company_id
        ).first()

    def list_suppliers(self, query) -> Tuple[List[Dict], int]:
        """List active suppliers sorted by name."""
        q = self.session.query(Supplier).filter(
            Supplier.company_id == self.company_id,
            Supplier.is_active == True
        )
        search = query.get('search')
        if search:
            q = q.filter(Supplier.name.ilike(f"%{search}%"))

        total = q.count()
        suppliers = q.order_by(Supplier.name).offset(query.skip).limit(query.limit).all()
        return [s.to_dict() for s in suppliers], total

    def get_supplier(self, supplier_id: str) -> Optional[Dict]:
        """Get a supplier by ID."""
        supplier = self._get(supplier_id)
        return supplier.to_dict() if supplier else None

    def create_supplier(self, data: Dict, user_id: str = None) -> Dict:
        """Create a new supplier."""
        supplier = Supplier(company_id=self.company_id, created_by=user_id, updated_by=user_id)
        for field, column in SUPPLIER_FIELDS.items():
            if field in data:
                setattr(supplier, column, data[field])
        self.session.add(supplier)
        self.session.flush()
        logger.info(f"Created supplier: {supplier.id}")
        return supplier.to_dict()

    def update_supplier(self, supplier_id: str, data: Dict, user_id: str = None) -> Optional[Dict]:
        """Update a supplier."""
        supplier = self._get(supplier_id)
        if not supplier:
            return None
        for field, column in SUPPLIER_FIELDS.items():
            if field in data:
                setattr(supplier, column, data[field])
        supplier.updated_by = user_id
        supplier.updated_at = datetime.utcnow()
        self.session.flush()
        logger.info(f"Updated supplier: {supplier_id}")
        return supplier.to_dict()

    def delete_supplier(self, supplier_id: str, user_id: str = None) -> bool:
        """Soft delete a supplier."""
        supplier = self._get(supplier_id)
        if not supplier:
            return False
        supplier.is_active = False
        supplier.updated_by = user_id
        supplier.updated_at = datetime.utcnow()
        self.session.flush()
        logger.info(f"Deleted (deactivated) supplier: {supplier_id}")
        return True
