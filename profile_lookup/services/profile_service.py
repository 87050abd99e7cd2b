"""
Profile lookup: username check, store fetch, email check.
"""
from __future__ import annotations

from typing import Optional

from redis.exceptions import RedisError

from profile_lookup.config import Config
from profile_lookup.errors import InvalidEmail, InvalidUsername
from profile_lookup.models import ProfileRecord
from profile_lookup.services.profile_fetcher import ProfileFetcher
from profile_lookup.services.profile_store import redis_store_factory
from profile_lookup.utils.validators import is_valid_email, is_valid_username


class ProfileService:
    """
    Validates the request and the stored record around one fetch.

    Errors are raised to the caller as-is: nothing here logs, retries or
    returns a partial record.
    """

    def __init__(self, fetcher: ProfileFetcher):
        self.fetcher = fetcher

    @classmethod
    def from_config(cls, config: Config) -> "ProfileService":
        fetcher = ProfileFetcher(
            config.REDIS_URL,
            store_factory=redis_store_factory(config),
            key_prefix=config.PROFILE_KEY_PREFIX,
        )
        return cls(fetcher)

    def fetch_profile(self, username: str) -> ProfileRecord:
        if not is_valid_username(username):
            raise InvalidUsername(username)

        record = self.fetcher.fetch(username)

        if not is_valid_email(record.email):
            raise InvalidEmail(username, record.email)

        return record

    def is_available(self) -> bool:
        """
        Whether a store connection can be opened right now.

        The Redis factory PINGs while connecting, so opening is the check.
        """
        try:
            store = self.fetcher.store_factory(self.fetcher.address)
        except (RedisError, ValueError):
            return False
        self.fetcher.release(store)
        return True


profile_service: Optional[ProfileService] = None


def init_profile_service(config: Config) -> ProfileService:
    global profile_service
    if profile_service is None:
        profile_service = ProfileService.from_config(config)
    return profile_service


def get_profile_service() -> Optional[ProfileService]:
    return profile_service


def fetch_profile(username: str, fetcher: Optional[ProfileFetcher] = None) -> ProfileRecord:
    """
    Look up ``username`` and return its validated record.

    Uses ``fetcher`` when given, else the initialized module service, else a
    service built from the default ``Config``. Raises InvalidUsername,
    FetchFailure or InvalidEmail.
    """
    if fetcher is not None:
        service = ProfileService(fetcher)
    else:
        service = get_profile_service() or init_profile_service(Config)
    return service.fetch_profile(username)
