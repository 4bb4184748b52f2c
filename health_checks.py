"""
Health Check & Monitoring Endpoints
Reports database reachability plus process uptime and memory
"""
import os
import time
import psutil
from datetime import datetime
from typing import Dict, Any
from flask import Blueprint, jsonify, current_app
import logging

from config import get_missing_env_vars
from database import check_db_connection

logger = logging.getLogger(__name__)

# Create Blueprint for health check routes
health_bp = Blueprint('health', __name__)

# Track application start time
START_TIME = time.time()


def get_memory_usage() -> Dict[str, Any]:
    """
    Process memory in MB

    Returns:
        Dictionary of memory figures, empty if psutil cannot read them
    """
    try:
        process = psutil.Process()
        memory = process.memory_info()
        return {
            'rss_mb': round(memory.rss / 1024 / 1024, 2),
            'vms_mb': round(memory.vms / 1024 / 1024, 2),
            'percent': round(process.memory_percent(), 2),
        }
    except Exception as e:
        logger.warning(f"Failed to get memory usage: {e}")
        return {}


def get_uptime() -> Dict[str, Any]:
    """
    Get application uptime

    Returns:
        Dictionary with uptime information
    """
    uptime_seconds = time.time() - START_TIME

    return {
        'uptime_seconds': round(uptime_seconds, 2),
        'started_at': datetime.fromtimestamp(START_TIME).isoformat()
    }


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Health check endpoint.
    200 "healthy" when the database answers, 503 "unhealthy" when connecting raised.
    """
    started = time.time()
    payload = {
        'timestamp': datetime.utcnow().isoformat(),
        'service': current_app.config.get('SERVICE_NAME', 'bizabode-api'),
        'version': current_app.config.get('VERSION', '1.0.0'),
        'environment': os.environ.get('FLASK_ENV', 'development'),
        'uptime': get_uptime(),
        'memory': get_memory_usage(),
    }

    try:
        check_db_connection()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        payload.update({
            'status': 'unhealthy',
            'database': 'disconnected',
            'error': str(e),
        })
        return jsonify(payload), 503

    missing = get_missing_env_vars(current_app.config.get('REQUIRED_ENV_VARS', []))
    if missing:
        payload['warnings'] = [f"Missing environment variables: {', '.join(missing)}"]

    payload.update({
        'status': 'healthy',
        'database': 'connected',
        'response_time_ms': round((time.time() - started) * 1000, 2),
    })
    return jsonify(payload), 200


@health_bp.route('/ping', methods=['GET'])
def ping():
    """Simple ping endpoint for basic connectivity tests"""
    return 'pong', 200


def register_health_checks(app):
    """
    Register health check blueprint with Flask app

    Args:
        app: Flask application instance
    """
    app.register_blueprint(health_bp, url_prefix='/api')
    logger.info("Health check endpoints registered: /api/health, /api/ping")
