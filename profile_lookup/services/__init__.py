"""
Service layer exports.
"""
from .profile_fetcher import ProfileFetcher
from .profile_service import (
    ProfileService,
    fetch_profile,
    get_profile_service,
    init_profile_service,
)
from .profile_store import ProfileStore, RedisProfileStore

__all__ = [
    "ProfileFetcher",
    "ProfileService",
    "ProfileStore",
    "RedisProfileStore",
    "fetch_profile",
    "get_profile_service",
    "init_profile_service",
]
