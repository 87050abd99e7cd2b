"""
Internal routes including the health check.
"""
from flask import Blueprint, current_app, jsonify

internal_bp = Blueprint('internal', __name__, url_prefix='/internal')


@internal_bp.route('/health')
def internal_health():
    """Internal health check endpoint for uptime monitoring."""
    service = current_app.extensions['profile_service']
    return jsonify({
        'status': 'healthy',
        'service': current_app.config.get('SERVICE_NAME', 'profile-lookup'),
        'store': service.is_available()
    }), 200
