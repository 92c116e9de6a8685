"""Pytest fixtures for tickbox tests."""

import asyncio

import pytest

from tickbox.config import PromptConfig
from tickbox.dispatcher import KeymapDispatcher, initial_snapshot
from tickbox.keys import decode_key
from tickbox.store import SnapshotStore


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear module-level caches before each test."""
    from tickbox.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def make_prompt():
    """Factory: build (store, dispatcher) for a list of choices."""

    def factory(choices, **options):
        config = PromptConfig(choices=choices, **options)
        store = SnapshotStore(initial_snapshot(config))
        return store, KeymapDispatcher(store, config)

    return factory


@pytest.fixture
def press():
    """Feed raw keys to a dispatcher, one at a time, and return the last snapshot."""

    def send(dispatcher, *keys):
        async def run():
            snapshot = None
            for key in keys:
                snapshot = await dispatcher.dispatch(decode_key(key))
            return snapshot

        return asyncio.run(run())

    return send
