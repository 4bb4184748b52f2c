"""
Lead Repository - Database access layer for CRM leads.
"""

import logging
from datetime import datetime
from typing import List, Optional, Dict, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import or_

from database.models import Lead

logger = logging.getLogger(__name__)

LEAD_FIELDS = {
    'name': 'name',
    'email': 'email',
    'phone': 'phone',
    'company': 'company',
    'source': 'source',
    'status': 'status',
    'assignedTo': 'assigned_to',
    'estimatedValue': 'estimated_value',
    'notes': 'notes',
}


class LeadRepository:
    """Repository for lead database operations."""

    def __init__(self, session: Session, company_id: str):
        self.session = session
        self.company_id = company_id

    def _get(self, lead_id: str) -> Optional[Lead]:
        return self.session.query(Lead).filter(
            Lead.id == lead_id,
            Lead.company_id == self.company_id
        ).first()

    def list_leads(self, query) -> Tuple[List[Dict], int]:
        """
        List leads newest first.

        Recognized filters: search (name/email/company), status, assignedTo.
        """
        q = self.session.query(Lead).filter(Lead.company_id == self.company_id)

        status = query.get('status')
        if status:
            q = q.filter(Lead.status == status)
        search = query.get('search')
        if search:
            pattern = f"%{search}%"
            q = q.filter(or_(
                Lead.name.ilike(pattern),
                Lead.email.ilike(pattern),
                Lead.company.ilike(pattern)
            ))
        assigned_to = query.get('assignedTo')
        if assigned_to:
            q = q.filter(Lead.assigned_to == assigned_to)

        total = q.count()
        leads = q.order_by(Lead.created_at.desc()).offset(query.skip).limit(query.limit).all()
        return [lead.to_dict() for lead in leads], total

    def get_lead(self, lead_id: str) -> Optional[Dict]:
        lead = self._get(lead_id)
        return lead.to_dict() if lead else None

    def create_lead(self, data: Dict) -> Dict:
        lead = Lead(company_id=self.company_id)
        for field, column in LEAD_FIELDS.items():
            if field in data:
                setattr(lead, column, data[field])
        self.session.add(lead)
        self.session.flush()
        logger.info(f"Created lead: {lead.id}")
        return lead.to_dict()

    def update_lead(self, lead_id: str, data: Dict) -> Optional[Dict]:
        lead = self._get(lead_id)
        if not lead:
            return None
        for field, column in LEAD_FIELDS.items():
            if field in data:
                setattr(lead, column, data[field])
        lead.updated_at = datetime.utcnow()
        self.session.flush()
        logger.info(f"Updated lead: {lead_id}")
        return lead.to_dict()

    def delete_lead(self, lead_id: str) -> bool:
        """Hard delete a lead."""
        lead = self._get(lead_id)
        if not lead:
            return False
        self.session.delete(lead)
        self.session.flush()
        logger.info(f"Deleted lead: {lead_id}")
        return True
