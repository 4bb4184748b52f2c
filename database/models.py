"""
SQLAlchemy models for the Bizabode Operations API.
Inventory, procurement, CRM and after-sales tables, all scoped by company.
"""

import uuid
from datetime import datetime
from sqlalchemy import (
    Column, String, Text, Integer, Float, Boolean, DateTime,
    ForeignKey, JSON, Index, UniqueConstraint
)
from sqlalchemy.orm import relationship
from database.connection import Base


def generate_uuid():
    """Generate a new UUID."""
    return str(uuid.uuid4())


def _iso(value):
    return value.isoformat() if value else None


# =============================================================================
# USERS
# =============================================================================

class User(Base):
    """Application users; one company per user."""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    company_name = Column(String(255))
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), default='viewer', nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_login = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('ix_users_company', 'company_id'),
    )

    def to_dict(self, include_sensitive=False):
        data = {
            'id': self.id,
            'companyId': self.company_id,
            'companyName': self.company_name,
            'email': self.email,
            'name': self.name,
            'role': self.role,
            'isActive': bool(self.is_active),
            'lastLogin': _iso(self.last_login),
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }
        if include_sensitive:
            data['passwordHash'] = self.password_hash
        return data


# =============================================================================
# INVENTORY
# =============================================================================

class InventoryItem(Base):
    """Stock-keeping items."""
    __tablename__ = 'inventory_items'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    sku = Column(String(100), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, default='')
    category = Column(String(100), nullable=False)
    quantity = Column(Integer, default=0, nullable=False)
    reorder_level = Column(Integer, default=10, nullable=False)
    unit_price = Column(Float, default=0)
    cost_price = Column(Float, default=0)
    location = Column(String(255))
    barcode = Column(String(100))
    supplier = Column(String(255))
    image_url = Column(Text)
    critical = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    movements = relationship("StockMovement", back_populates="item",
                             order_by="StockMovement.created_at.desc()")

    __table_args__ = (
        UniqueConstraint('company_id', 'sku', name='uq_inventory_company_sku'),
        Index('ix_inventory_company', 'company_id'),
        Index('ix_inventory_category', 'category'),
    )

    @property
    def is_low_stock(self):
        return (self.quantity or 0) <= (self.reorder_level or 0)

    def to_dict(self):
        return {
            'id': self.id,
            'companyId': self.company_id,
            'sku': self.sku,
            'name': self.name,
            'description': self.description or '',
            'category': self.category,
            'quantity': self.quantity,
            'reorderLevel': self.reorder_level,
            'unitPrice': self.unit_price,
            'costPrice': self.cost_price,
            'location': self.location,
            'barcode': self.barcode,
            'supplier': self.supplier,
            'imageUrl': self.image_url,
            'critical': bool(self.critical),
            'isActive': bool(self.is_active),
            'lowStock': self.is_low_stock,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


class StockMovement(Base):
    """Audit trail of quantity adjustments."""
    __tablename__ = 'stock_movements'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    item_id = Column(String(36), ForeignKey('inventory_items.id'), nullable=False)
    movement_type = Column(String(20), nullable=False)  # in, out
    quantity = Column(Integer, nullable=False)
    previous_quantity = Column(Integer, nullable=False)
    new_quantity = Column(Integer, nullable=False)
    reason = Column(Text)
    performed_by = Column(String(64))
    created_at = Column(DateTime, default=datetime.utcnow)

    item = relationship("InventoryItem", back_populates="movements")

    def to_dict(self):
        return {
            'id': self.id,
            'itemId': self.item_id,
            'type': self.movement_type,
            'quantity': self.quantity,
            'previousQuantity': self.previous_quantity,
            'newQuantity': self.new_quantity,
            'reason': self.reason,
            'performedBy': self.performed_by,
            'createdAt': _iso(self.created_at),
        }


# =============================================================================
# PROCUREMENT
# =============================================================================

class Supplier(Base):
    """Vendors goods are purchased from."""
    __tablename__ = 'suppliers'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    address = Column(JSON, default=dict)
    contact_person = Column(String(255))
    tax_id = Column(String(100))
    payment_terms = Column(String(100))
    notes = Column(Text)
    is_active = Column(Boolean, default=True, nullable=False)
    created_by = Column(String(64))
    updated_by = Column(String(64))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('ix_suppliers_company_name', 'company_id', 'name'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'companyId': self.company_id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'address': self.address or {},
            'contactPerson': self.contact_person,
            'taxId': self.tax_id,
            'paymentTerms': self.payment_terms,
            'notes': self.notes,
            'isActive': bool(self.is_active),
            'createdBy': self.created_by,
            'updatedBy': self.updated_by,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


# =============================================================================
# CRM
# =============================================================================

class Lead(Base):
    """Prospective customers."""
    __tablename__ = 'leads'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    company = Column(String(255))
    source = Column(String(50), default='other')
    status = Column(String(50), default='new')
    assigned_to = Column(String(64))
    estimated_value = Column(Float, default=0)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('ix_leads_company', 'company_id'),
        Index('ix_leads_status', 'status'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'companyId': self.company_id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'company': self.company,
            'source': self.source,
            'status': self.status,
            'assignedTo': self.assigned_to,
            'estimatedValue': self.estimated_value,
            'notes': self.notes,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }


# =============================================================================
# AFTER-SALES
# =============================================================================

class Delivery(Base):
    """Outbound deliveries to customers."""
    __tablename__ = 'deliveries'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    company_id = Column(String(64), nullable=False)
    delivery_number = Column(String(50), nullable=False)
    customer_name = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    status = Column(String(30), default='scheduled')
    scheduled_date = Column(String(30))
    driver_name = Column(String(255))
    items = Column(JSON, default=list)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('ix_deliveries_company', 'company_id'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'companyId': self.company_id,
            'deliveryNumber': self.delivery_number,
            'customerName': self.customer_name,
            'address': self.address,
            'status': self.status,
            'scheduledDate': self.scheduled_date,
            'driverName': self.driver_name,
            'items': self.items or [],
            'notes': self.notes,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }
