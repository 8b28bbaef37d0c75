from backend.events_service.registry import EventRegistry
from backend.gateway.server import create_app, get_cors_origins
from backend.ledger_service.client import NullLedgerClient, PendingLedgerClient


def test_ping(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_json()["status"] == "gateway_ok"


def test_health_reports_event_count(client):
    client.post("/api/events", json={"name": "x"})
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "events": 1}


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Not Found"


def test_method_not_allowed(client):
    response = client.delete("/api/events/0")
    assert response.status_code == 405
    assert "error" in response.get_json()


def test_unhandled_error_returns_500(client, registry, mocker):
    mocker.patch.object(registry, "list", side_effect=RuntimeError("boom"))
    response = client.get("/api/events")
    assert response.status_code == 500
    assert response.get_json()["error"] == "Internal Server Error"


def test_each_app_gets_its_own_registry():
    first = create_app(ledger=NullLedgerClient()).test_client()
    second = create_app(ledger=NullLedgerClient()).test_client()

    first.post("/api/events", json={"name": "x"})
    assert len(first.get("/api/events").get_json()) == 1
    assert second.get("/api/events").get_json() == []


def test_shared_registry_is_used():
    registry = EventRegistry()
    registry.create({"name": "preloaded"})
    client = create_app(registry=registry, ledger=NullLedgerClient()).test_client()
    assert client.get("/api/events/0").get_json()["name"] == "preloaded"


def test_ledger_picked_from_environment(monkeypatch):
    monkeypatch.setenv("LEDGER_CONTRACT_ID", "CDONATIFI")
    app = create_app()
    assert isinstance(app.extensions["ledger_client"], PendingLedgerClient)


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5500, http://example.org")
    assert get_cors_origins() == ["http://localhost:5500", "http://example.org"]

    monkeypatch.setenv("CORS_ORIGINS", " , ")
    assert get_cors_origins() == ["*"]
