"""
Inventory Item API Routes Blueprint

- /api/items                       - List (paginated, filterable) and create items
- /api/items/<id>                  - Get, update, soft-delete an item
- /api/items/<id>/adjust-stock     - Adjust quantity and record a stock movement
"""

import logging
from flask import Blueprint, request, g

from auth import permission_required
from database import get_db_session
from services import InventoryRepository, DuplicateSkuError
from validators import validate_item_request, validate_stock_adjustment, sanitize_string
from app.utils.query import normalize_query, build_pagination
from app.utils.responses import (
    success_response,
    error_response,
    not_found_response,
    server_error_response,
)

logger = logging.getLogger(__name__)

items_bp = Blueprint('items_bp', __name__)


def _repository(db):
    return InventoryRepository(db, g.auth.user.company_id)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _clean(data):
    return {k: sanitize_string(v) if isinstance(v, str) else v for k, v in data.items()}


@items_bp.route('/api/items', methods=['GET'])
@permission_required('items', 'read')
def list_items():
    """List items. Filters: search, category, lowStock, critical"""
    query = normalize_query(request.args)
    try:
        with get_db_session() as db:
            items, total = _repository(db).list_items(query)
        return success_response({
            'items': items,
            'pagination': build_pagination(query.page, query.limit, total),
        })
    except Exception as e:
        logger.error(f"Get items error: {e}")
        return server_error_response("Failed to get items")


@items_bp.route('/api/items', methods=['POST'])
@permission_required('items', 'create')
def create_item():
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_item_request(data)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            item = _repository(db).create_item(_clean(data))
        return success_response(item, "Item created successfully", 201)
    except DuplicateSkuError:
        return error_response("An item with this SKU already exists", 409)
    except Exception as e:
        logger.error(f"Create item error: {e}")
        return server_error_response("Failed to create item")


@items_bp.route('/api/items/<item_id>', methods=['GET'])
@permission_required('items', 'read')
def get_item(item_id):
    try:
        with get_db_session() as db:
            item = _repository(db).get_item(item_id)
        if not item:
            return not_found_response("Item not found")
        return success_response(item, "Item fetched successfully")
    except Exception as e:
        logger.error(f"Error fetching item {item_id}: {e}")
        return server_error_response("Failed to fetch item")


@items_bp.route('/api/items/<item_id>', methods=['PUT'])
@permission_required('items', 'update')
def update_item(item_id):
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_item_request(data, partial=True)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            item = _repository(db).update_item(item_id, _clean(data))
        if not item:
            return not_found_response("Item not found")
        return success_response(item, "Item updated successfully")
    except DuplicateSkuError:
        return error_response("An item with this SKU already exists", 409)
    except Exception as e:
        logger.error(f"Error updating item {item_id}: {e}")
        return server_error_response("Failed to update item")


@items_bp.route('/api/items/<item_id>', methods=['DELETE'])
@permission_required('items', 'delete')
def delete_item(item_id):
    try:
        with get_db_session() as db:
            deleted = _repository(db).delete_item(item_id)
        if not deleted:
            return not_found_response("Item not found")
        return success_response({'id': item_id}, "Item deleted successfully")
    except Exception as e:
        logger.error(f"Error deleting item {item_id}: {e}")
        return server_error_response("Failed to delete item")


@items_bp.route('/api/items/<item_id>/adjust-stock', methods=['POST'])
@permission_required('items', 'update')
def adjust_stock(item_id):
    """Body: {"adjustment": int, "reason": str}"""
    data = _json_body()
    if data is None:
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_stock_adjustment(data)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            item = _repository(db).adjust_quantity(
                item_id,
                data['adjustment'],
                reason=data.get('reason'),
                performed_by=g.auth.user.id,
            )
        if not item:
            return not_found_response("Item not found")
        return success_response(item, "Stock adjusted successfully")
    except Exception as e:
        logger.error(f"Error adjusting stock {item_id}: {e}")
        return server_error_response("Failed to adjust stock")
