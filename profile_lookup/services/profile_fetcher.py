"""
Single point lookup of a profile record against the store.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from redis.exceptions import RedisError

from profile_lookup.errors import FetchFailure
from profile_lookup.models import ProfileRecord
from profile_lookup.services.profile_store import ProfileStore, RedisProfileStore

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str], ProfileStore]


class ProfileFetcher:
    """
    Opens a store connection per call, reads one key and decodes it.

    ``store_factory`` receives ``address`` and returns something with
    ``get(key)`` and ``close()``; tests hand in an in-memory store here.
    """

    def __init__(self, address: str,
                 store_factory: Optional[StoreFactory] = None,
                 key_prefix: str = ''):
        self.address = address
        self.store_factory = store_factory or RedisProfileStore.connect
        self.key_prefix = key_prefix

    def _get_profile_key(self, username: str) -> str:
        return f"{self.key_prefix}{username}"

    def fetch(self, username: str) -> ProfileRecord:
        try:
            store = self.store_factory(self.address)
        except (RedisError, ValueError) as exc:
            raise FetchFailure(username, FetchFailure.CONNECT, str(exc)) from exc

        try:
            return self._read_record(store, username)
        finally:
            self.release(store)

    def _read_record(self, store: ProfileStore, username: str) -> ProfileRecord:
        try:
            payload = store.get(self._get_profile_key(username))
        except RedisError as exc:
            raise FetchFailure(username, FetchFailure.LOOKUP, str(exc)) from exc

        if payload is None:
            raise FetchFailure(username, FetchFailure.LOOKUP, "no record stored")

        try:
            record = ProfileRecord.from_payload(payload)
        except ValueError as exc:
            raise FetchFailure(username, FetchFailure.DECODE, str(exc)) from exc

        # Stored record must belong to the requested username
        if record.username != username:
            raise FetchFailure(
                username, FetchFailure.DECODE,
                f"stored username '{record.username}' does not match key"
            )

        return record

    def release(self, store: ProfileStore) -> None:
        """
        Close ``store``; a failing close never replaces the lookup result or its error.
        """
        try:
            store.close()
        except RedisError as exc:
            logger.debug(f"Ignoring error while closing profile store: {exc}")
