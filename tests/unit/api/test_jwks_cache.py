import asyncio

import pytest

from src.api.utils import jwt as jwt_utils

KEYS = {"keys": [{"kid": "current"}]}


@pytest.fixture
def fetches(monkeypatch):
    calls = []

    async def fake_fetch():
        calls.append(1)
        await asyncio.sleep(0)
        return KEYS

    monkeypatch.setattr(jwt_utils, "_jwks", None)
    monkeypatch.setattr(jwt_utils, "_jwks_lock", asyncio.Lock())
    monkeypatch.setattr(jwt_utils, "_fetch_jwks", fake_fetch)
    return calls


@pytest.mark.asyncio
async def test_concurrent_cache_misses_fetch_once(fetches):
    """Single-flight refresh

    Given an empty key cache
    When several requests need the same key at once
    Then the keys are fetched once and every request gets them
    """
    results = await asyncio.gather(*(jwt_utils.get_jwks("current") for _ in range(5)))

    assert len(fetches) == 1
    assert all(result == KEYS for result in results)


@pytest.mark.asyncio
async def test_known_key_is_served_from_cache(fetches):
    await jwt_utils.get_jwks("current")
    await jwt_utils.get_jwks("current")
    await jwt_utils.get_jwks()

    assert len(fetches) == 1


@pytest.mark.asyncio
async def test_unknown_key_triggers_refetch(fetches):
    await jwt_utils.get_jwks("current")

    await jwt_utils.get_jwks("rotated")

    assert len(fetches) == 2
