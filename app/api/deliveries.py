"""
Delivery API Routes Blueprint

- /api/crm/deliveries                 - List deliveries (paginated), schedule a delivery
- /api/crm/deliveries/<id>/cancel     - Acknowledge a cancellation (not persisted)
- /api/crm/deliveries/<id>/complete   - Acknowledge a completion (not persisted)

The cancel and complete endpoints echo the request body back with a success
envelope and do not look the delivery up. Clients rely on that response shape,
so it is kept until the delivery workflow lands.
"""

import logging
from flask import Blueprint, request, g

from auth import permission_required
from database import get_db_session
from services import DeliveryRepository
from validators import validate_delivery_request
from app.utils.query import normalize_query, build_pagination
from app.utils.responses import success_response, error_response, server_error_response

logger = logging.getLogger(__name__)

deliveries_bp = Blueprint('deliveries_bp', __name__)


@deliveries_bp.route('/api/crm/deliveries', methods=['GET'])
@permission_required('deliveries', 'read')
def list_deliveries():
    query = normalize_query(request.args)
    try:
        with get_db_session() as db:
            deliveries, total = DeliveryRepository(db, g.auth.user.company_id).list_deliveries(query)
        return success_response({
            'deliveries': deliveries,
            'pagination': build_pagination(query.page, query.limit, total),
        })
    except Exception as e:
        logger.error(f"Error fetching deliveries: {e}")
        return server_error_response("Failed to fetch deliveries")


@deliveries_bp.route('/api/crm/deliveries', methods=['POST'])
@permission_required('deliveries', 'create')
def create_delivery():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return error_response("Request body must be a JSON object", 400)

    is_valid, error = validate_delivery_request(data)
    if not is_valid:
        return error_response(error, 400)

    try:
        with get_db_session() as db:
            delivery = DeliveryRepository(db, g.auth.user.company_id).create_delivery(data)
        return success_response(delivery, "Delivery created successfully", 201)
    except Exception as e:
        logger.error(f"Error creating delivery: {e}")
        return server_error_response("Failed to create delivery")


def _acknowledge(delivery_id, verb):
    body = request.get_json(force=True)
    if body is None:
        body = {}
    logger.warning(f"Delivery {delivery_id} {verb} acknowledged without persistence")
    return success_response({'id': delivery_id, **body}, f"Delivery {delivery_id} {verb} successfully")


@deliveries_bp.route('/api/crm/deliveries/<delivery_id>/cancel', methods=['POST'])
def cancel_delivery(delivery_id):
    # TODO: mark the delivery cancelled once Delivery status transitions are defined
    try:
        return _acknowledge(delivery_id, 'cancelled')
    except Exception as e:
        logger.error(f"Error cancelling delivery {delivery_id}: {e}")
        return server_error_response("Failed to cancel delivery")


@deliveries_bp.route('/api/crm/deliveries/<delivery_id>/complete', methods=['POST'])
def complete_delivery(delivery_id):
    # TODO: mark the delivery delivered once Delivery status transitions are defined
    try:
        return _acknowledge(delivery_id, 'completed')
    except Exception as e:
        logger.error(f"Error completing delivery {delivery_id}: {e}")
        return server_error_response("Failed to complete delivery")
