"""
Main Flask application factory.
"""
from flask import Flask

from profile_lookup.config import Config
from profile_lookup.errors import FetchFailure, InvalidEmail, InvalidUsername
from profile_lookup.models import ProfileRecord
from profile_lookup.services import ProfileService, fetch_profile

__all__ = [
    "Config",
    "FetchFailure",
    "InvalidEmail",
    "InvalidUsername",
    "ProfileRecord",
    "create_app",
    "fetch_profile",
]


def create_app(config_class=Config, service=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Register blueprints
    from profile_lookup.routes.profiles import profiles_bp
    from profile_lookup.routes.internal import internal_bp

    app.register_blueprint(profiles_bp)
    app.register_blueprint(internal_bp)

    # Each app gets a service for its own config; the module singleton backs bare fetch_profile()
    app.extensions['profile_service'] = service or ProfileService.from_config(config_class)

    return app
