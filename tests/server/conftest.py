"""
Fixtures shared by all server tests.

Each test gets its own resolver — we reset the server's _resolver before
every test via the autouse `fresh_resolver` fixture, then pre-init it so the
FastAPI lifespan's init_resolver() call hits the guard and skips the
config file.
"""
import pytest
import server.state as state_module
from fastapi.testclient import TestClient
from mimeref.resolver import Resolver
from server.main import app

# Override set installed on the test resolver
OVERRIDES = {
    "text/html": {"compressible": False},
    "application/x-acme": {"extensions": ["acme"], "charset": "UTF-8"},
}


@pytest.fixture(autouse=True)
def fresh_resolver():
    """Give every server test a private resolver built from OVERRIDES."""
    state_module._resolver = None
    state_module.init_resolver(Resolver(override=OVERRIDES))
    yield
    state_module._resolver = None


@pytest.fixture
def client():
    """FastAPI TestClient backed by the test resolver."""
    with TestClient(app) as c:
        yield c
