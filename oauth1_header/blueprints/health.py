"""
Health check endpoint blueprint.
"""
import logging
from flask import Blueprint, jsonify, current_app

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Health check endpoint.

    Returns:
        200 OK: Credentials are configured
            JSON: {"status": "healthy", "credentials": "configured"}
        503 Service Unavailable: No credentials configured
            JSON: {"status": "unhealthy", "credentials": "not_configured", "message": "..."}
    """
    signer = current_app.config.get('SIGNER')

    if signer is None:
        logger.error("Health check failed - no credentials configured")
        return jsonify({
            'status': 'unhealthy',
            'credentials': 'not_configured',
            'message': 'OAuth credentials are not configured'
        }), 503

    return jsonify({
        'status': 'healthy',
        'credentials': 'configured'
    }), 200
