"""Shared pytest fixtures for the AI Study test suite."""

from __future__ import annotations

import pytest

from aistudy.state import AppState, Features, FileStorage, MemoryStorage, Navigator, PersistenceAdapter

STORAGE_KEY = "glassy_v3_data"


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def persistence(memory_storage):
    return PersistenceAdapter(memory_storage, STORAGE_KEY)


@pytest.fixture
def store(persistence):
    """Fresh store backed by in-memory storage."""
    return AppState(persistence)


@pytest.fixture
def file_store(tmp_path):
    """Store writing to a throwaway data directory."""
    return AppState(PersistenceAdapter(FileStorage(tmp_path / "data"), STORAGE_KEY))


@pytest.fixture
def features(store):
    return Features(store)


@pytest.fixture
def nav(store):
    return Navigator(store)


@pytest.fixture
def restart(persistence):
    """Simulate a restart: new store from INITIAL_STATE, hydrated from storage."""
    def _restart() -> AppState:
        fresh = AppState(persistence)
        fresh.hydrate_from_storage()
        return fresh
    return _restart
