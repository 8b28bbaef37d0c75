import pytest

from backend.events_service.registry import EventRegistry
from backend.gateway.server import create_app
from backend.ledger_service.client import NullLedgerClient


@pytest.fixture
def registry():
    return EventRegistry()


@pytest.fixture
def ledger():
    return NullLedgerClient()


@pytest.fixture
def app(registry, ledger):
    app = create_app(registry=registry, ledger=ledger)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def run4good():
    """
    Sample create payload.
    """
    return {
        "name": "Run4Good",
        "nit": "123",
        "email": "a@b.com",
        "website": "x.org",
        "goal_amount": 1000,
        "deadline": "2025-12-31",
    }
