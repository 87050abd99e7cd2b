"""
Application configuration.
"""
import os

from dotenv import load_dotenv
load_dotenv()


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'

    # Profile store (Redis)
    REDIS_URL = os.environ.get('REDIS_URL') or 'redis://localhost:6379/0'
    REDIS_SOCKET_CONNECT_TIMEOUT = float(os.environ.get('REDIS_SOCKET_CONNECT_TIMEOUT', '5'))
    REDIS_SOCKET_TIMEOUT = float(os.environ.get('REDIS_SOCKET_TIMEOUT', '5'))

    # Stored records are keyed by the bare username unless a prefix is set
    PROFILE_KEY_PREFIX = os.environ.get('PROFILE_KEY_PREFIX', '')

    SERVICE_NAME = 'profile-lookup'
