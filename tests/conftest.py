"""Shared test fixtures and helpers."""

from __future__ import annotations

import json

import pytest

from profile_lookup.services.profile_fetcher import ProfileFetcher
from profile_lookup.services.profile_service import ProfileService
from tests.fakes.profile_store import FakeProfileStore


def make_payload(username: str = "steven", email: str = "12345678@qq.com", **extra) -> bytes:
    """Serialize a stored profile the way it sits in Redis."""
    return json.dumps({"username": username, "email": email, **extra}).encode("utf-8")


@pytest.fixture
def store():
    return FakeProfileStore(
        {
            "steven": make_payload(),
            "invalid_email": make_payload("invalid_email", "test.com"),
        }
    )


@pytest.fixture
def fetcher(store):
    return ProfileFetcher("redis://fake:6379/0", store_factory=store.factory)


@pytest.fixture
def service(fetcher):
    return ProfileService(fetcher)
