"""
Supplier API Routes Blueprint

- /api/suppliers        - List active suppliers (paginated), create supplier
- /api/suppliers/<id>   - Get, update, deactivate supplier
"""

import logging
from flask import Blueprint, request, g

from auth import permission_required
from database import get_db_session
from services import SupplierRepository
from validators import validate_supplier_request
from app.utils.query import normalize_query, build_pagination
from app.utils.responses import (
    success_response,
    error_response,
    not_found_response,
    server_error_response,
)

logger = logging.getLogger(__name__)

suppliers_bp = Blueprint('suppliers_bp', __name__)


def _repository(db):
    return SupplierRepository(db, g.auth.user.company_id)


@suppliers_bp.route('/api/suppliers', methods=['GET'])
@permission_required('suppliers', 'read')
def list_suppliers():
    query = normalize_query(request.args)
    try:
        with get_db_session() as db:
            suppliers, total = _repository(db).list_suppliers(query)
        return success_response({
            'suppliers': suppliers,
            'pagination': build_pagination(query.page, query.limit, total),
        }, "Suppliers fetched successfully")
    except Exception as e:
        logger.error(f"Error fetching suppliers: {e}")
        return server_error_response("Failed to fetch suppliers")


@suppliers_bp.route('/api/suppliers', methods=['POST'])
@permission_required('suppliers', 'create')
def create_supplier():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_supplier_request(data)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            supplier = _repository(db).create_supplier(data, user_id=g.auth.user.id)
        return success_response(supplier, "Supplier created successfully", 201)
    except Exception as e:
        logger.error(f"Error creating supplier: {e}")
        return server_error_response("Failed to create supplier")


@suppliers_bp.route('/api/suppliers/<supplier_id>', methods=['GET'])
@permission_required('suppliers', 'read')
def get_supplier(supplier_id):
    try:
        with get_db_session() as db:
            supplier = _repository(db).get_supplier(supplier_id)
        if not supplier:
            return not_found_response("Supplier not found")
        return success_response(supplier, "Supplier details fetched successfully")
    except Exception as e:
        logger.error(f"Error fetching supplier {supplier_id}: {e}")
        return server_error_response("Failed to fetch supplier")


@suppliers_bp.route('/api/suppliers/<supplier_id>', methods=['PUT'])
@permission_required('suppliers', 'update')
def update_supplier(supplier_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_supplier_request(data, partial=True)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            supplier = _repository(db).update_supplier(supplier_id, data, user_id=g.auth.user.id)
        if not supplier:
            return not_found_response("Supplier not found")
        return success_response(supplier, "Supplier updated successfully")
    except Exception as e:
        logger.error(f"Error updating supplier {supplier_id}: {e}")
        return server_error_response("Failed to update supplier")


@suppliers_bp.route('/api/suppliers/<supplier_id>', methods=['DELETE'])
@permission_required('suppliers', 'delete')
def delete_supplier(supplier_id):
    try:
        with get_db_session() as db:
            deleted = _repository(db).delete_supplier(supplier_id, user_id=g.auth.user.id)
        if not deleted:
            return not_found_response("Supplier not found")
        return success_response(None, "Supplier deleted successfully")
    except Exception as e:
        logger.error(f"Error deleting supplier {supplier_id}: {e}")
        return server_error_response("Failed to delete supplier")
