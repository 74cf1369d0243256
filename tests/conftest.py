"""
Shared pytest fixtures for pilothub tests.

This module provides:
- A deterministic clock so page timestamps are predictable
- Seeded and empty stores
- An application + TestClient wired to a temporary documents root

Usage:
    def test_something(client):
        resp = client.get("/api/pages/home")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pilothub.api.app import create_app
from pilothub.api.settings import PilotHubAPISettings
from pilothub.ops.context import OperationContext
from pilothub.store.memory import MemStore

T0 = datetime(2025, 4, 1, 12, 0, tzinfo=UTC)


def make_clock(start: datetime = T0) -> Callable[[], datetime]:
    """Clock that advances one second per call."""
    state = {"now": start - timedelta(seconds=1)}

    def tick() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return tick


# =============================================================================
# Store fixtures
# =============================================================================


@pytest.fixture()
def t0() -> datetime:
    """First timestamp handed out by the test clock."""
    return T0


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    return make_clock()


@pytest.fixture()
def store(clock) -> MemStore:
    """Store loaded with the default data."""
    return MemStore.with_defaults(clock=clock)


@pytest.fixture()
def empty_store(clock) -> MemStore:
    return MemStore(clock=clock)


@pytest.fixture()
def ctx(store) -> OperationContext:
    return OperationContext(store=store, caller="test")


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture()
def settings(tmp_path) -> PilotHubAPISettings:
    return PilotHubAPISettings(documents_root=tmp_path, log_json=False)


@pytest.fixture()
def app(settings, store) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture()
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
