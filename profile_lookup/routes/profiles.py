"""
Profile lookup routes (HTTP).
"""
import logging

from flask import Blueprint, current_app, jsonify

from profile_lookup.errors import FetchFailure, InvalidEmail, InvalidUsername

logger = logging.getLogger(__name__)

profiles_bp = Blueprint('profiles', __name__, url_prefix='/api/profiles')


@profiles_bp.route('/<username>', methods=['GET'])
def get_profile(username):
    """Return the stored profile for ``username``."""
    service = current_app.extensions['profile_service']
    try:
        record = service.fetch_profile(username)
    except InvalidUsername:
        return jsonify({'error': 'invalid username'}), 400
    except FetchFailure as exc:
        logger.warning(f"Profile fetch for '{username}' failed at {exc.stage}: {exc}")
        return jsonify({'error': 'profile fetch failed'}), 502
    except InvalidEmail:
        return jsonify({'error': 'invalid email'}), 422

    return jsonify(record.to_dict()), 200
