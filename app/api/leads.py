"""
Lead API Routes Blueprint

- /api/leads        - List leads (paginated; search, status, assignedTo), create lead
- /api/leads/<id>   - Get, update, delete lead
"""

import logging
from flask import Blueprint, request, g

from auth import permission_required
from database import get_db_session
from services import LeadRepository
from validators import validate_lead_request
from app.utils.query import normalize_query, build_pagination
from app.utils.responses import (
    success_response,
    error_response,
    not_found_response,
    handle_api_error,
)

logger = logging.getLogger(__name__)

leads_bp = Blueprint('leads_bp', __name__)


def _repository(db):
    return LeadRepository(db, g.auth.user.company_id)


@leads_bp.route('/api/leads', methods=['GET'])
@permission_required('leads', 'read')
def list_leads():
    query = normalize_query(request.args)
    try:
        with get_db_session() as db:
            leads, total = _repository(db).list_leads(query)
        return success_response({
            'leads': leads,
            'pagination': build_pagination(query.page, query.limit, total),
        })
    except Exception as e:
        return handle_api_error(e)


@leads_bp.route('/api/leads', methods=['POST'])
@permission_required('leads', 'create')
def create_lead():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_lead_request(data)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            lead = _repository(db).create_lead(data)
        return success_response(lead, "Lead created successfully", 201)
    except Exception as e:
        return handle_api_error(e)


@leads_bp.route('/api/leads/<lead_id>', methods=['GET'])
@permission_required('leads', 'read')
def get_lead(lead_id):
    try:
        with get_db_session() as db:
            lead = _repository(db).get_lead(lead_id)
        if not lead:
            return not_found_response("Lead not found")
        return success_response(lead)
    except Exception as e:
        return handle_api_error(e)


@leads_bp.route('/api/leads/<lead_id>', methods=['PUT'])
@permission_required('leads', 'update')
def update_lead(lead_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_lead_request(data, partial=True)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            lead = _repository(db).update_lead(lead_id, data)
        if not lead:
            return not_found_response("Lead not found")
        return success_response(lead, "Lead updated successfully")
    except Exception as e:
        return handle_api_error(e)


@leads_bp.route('/api/leads/<lead_id>', methods=['DELETE'])
@permission_required('leads', 'delete')
def delete_lead(lead_id):
    try:
        with get_db_session() as db:
            deleted = _repository(db).delete_lead(lead_id)
        if not deleted:
            return not_found_response("Lead not found")
        return success_response(None, "Lead deleted successfully")
    except Exception as e:
        return handle_api_error(e)
