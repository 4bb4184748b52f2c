"""
Delivery Repository - Database access layer for after-sales deliveries.
"""

import logging
from datetime import datetime
from typing import List, Dict, Tuple
from sqlalchemy.orm import Session

from database.models import Delivery

logger = logging.getLogger(__name__)


class DeliveryRepository:
    """Repository for delivery database operations."""

    def __init__(self, session: Session, company_id: str):
        self.session = session
        self.company_id = company_id

    def list_deliveries(self, query) -> Tuple[List[Dict], int]:
        """List deliveries newest first, optionally filtered by status."""
        q = self.session.query(Delivery).filter(Delivery.company_id == self.company_id)
        status = query.get('status')
        if status:
            q = q.filter(Delivery.status == status)

        total = q.count()
        deliveries = (q.order_by(Delivery.created_at.desc())
                      .offset(query.skip).limit(query.limit).all())
        return [d.to_dict() for d in deliveries], total

    def next_delivery_number(self) -> str:
        """DEL-<year>-<sequence>, sequence counted per company."""
        count = self.session.query(Delivery).filter(
            Delivery.company_id == self.company_id
        ).count()
        return f"DEL-{datetime.utcnow().year}-{count + 1:05d}"

    def create_delivery(self, data: Dict) -> Dict:
        delivery = Delivery(
            company_id=self.company_id,
            delivery_number=self.next_delivery_number(),
            customer_name=data['customerName'],
            address=data['address'],
            status=data.get('status', 'scheduled'),
            scheduled_date=data.get('scheduledDate'),
            driver_name=data.get('driverName'),
            items=data.get('items', []),
            notes=data.get('notes'),
        )
        self.session.add(delivery)
        self.session.flush()
        logger.info(f"Created delivery: {delivery.delivery_number}")
        return delivery.to_dict()
