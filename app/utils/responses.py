"""
Uniform JSON envelopes for API responses.

Success:  {"success": true, "data": ..., "message": ...}
Failure:  {"success": false, "error": "..."}
"""

import logging
from typing import Any, Dict, List, Optional

from flask import jsonify

from validators import ValidationError

logger = logging.getLogger(__name__)


def success_response(data: Any = None, message: Optional[str] = None, status: int = 200):
    """
    Build a success envelope.

    Args:
        data: Payload (must be JSON serializable)
        message: Optional human readable message
        status: HTTP status code

    Returns:
        Tuple of (Response, status) for Flask
    """
    return jsonify({
        'success': True,
        'data': data,
        'message': message,
    }), status


def error_response(message: str, status: int = 500):
    """Build a failure envelope. Failure envelopes never carry data."""
    return jsonify({
        'success': False,
        'error': message,
    }), status


def unauthorized_response(message: str = 'Unauthorized'):
    return error_response(message, 401)


def forbidden_response(message: str = 'Forbidden'):
    return error_response(message, 403)


def not_found_response(message: str = 'Not found'):
    return error_response(message, 404)


def validation_error_response(errors: Dict[str, List[str]]):
    """Field-level validation failures: {"success": false, "errors": {...}}"""
    return jsonify({
        'success': False,
        'errors': errors,
    }), 400


def server_error_response(message: str = 'Internal server error'):
    return error_response(message, 500)


def handle_api_error(error: Exception, message: str = 'An unexpected error occurred'):
    """Translate an exception raised by a handler into a failure envelope."""
    if isinstance(error, ValidationError):
        if error.field:
            return validation_error_response({error.field: [error.message]})
        return error_response(error.message, 400)

    logger.error(f"API error: {error}", exc_info=True)
    return server_error_response(message)
