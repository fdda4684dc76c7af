"""API endpoint tests — the HTTP layer over the packaged default data."""

import pytest
from fastapi.testclient import TestClient

from configurator.api.main import create_app
from configurator.api.routes import get_service
from configurator.services.configurator_service import ConfiguratorService


@pytest.fixture
def client(settings):
    app = create_app()
    app.dependency_overrides[get_service] = lambda: ConfiguratorService(settings)
    yield TestClient(app)
    app.dependency_overrides.clear()


HINGED_LOCKED = {
    "doorType": "hinged", "frameType": "threeWay", "lock": "display-lock",
    "width": 77.8, "height": 220,
}


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_price(client):
    resp = client.post("/api/price", json={"config": HINGED_LOCKED})
    assert resp.status_code == 200
    assert resp.json() == {"price": 29600, "matrixKey": "hinged_3w_l"}


def test_normalize(client):
    resp = client.post("/api/normalize", json={
        "config": HINGED_LOCKED, "field": "doorType", "value": "double",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["rejected"] is False
    assert body["config"]["width"] == 73.5
    assert body["config"]["frameType"] == "threeWay"
    assert body["config"]["lock"] == "none"


def test_normalize_rejection_is_reported(client):
    resp = client.post("/api/normalize", json={
        "config": {"doorType": "storage-200-full", "width": 160, "height": 200},
        "field": "width", "value": 200,
    })
    body = resp.json()
    assert body["rejected"] is True
    assert body["config"]["width"] == 160
    assert body["notices"]


@pytest.mark.parametrize("field,value", [("colour", "ww"), ("width", -1)])
def test_normalize_bad_input(client, field, value):
    resp = client.post("/api/normalize", json={"field": field, "value": value})
    assert resp.status_code == 422


def test_check(client):
    resp = client.post("/api/check", json={
        "doors": [{"id": "wd-1", "config": HINGED_LOCKED, "price": 29600, "roomName": "Toilet"}],
        "projectInfo": {"defaultColor": "ww", "defaultHandle": "satin-nickel"},
    })
    assert resp.status_code == 200
    assert resp.json() == {
        "messages": ["[Display locks are specified at (1) locations]"],
        "doorCount": 1,
    }


def test_quotation(client):
    resp = client.post("/api/quotation", json={
        "doors": [{"id": "wd-1", "config": HINGED_LOCKED, "price": 29600, "roomName": "Toilet"}],
        "projectInfo": {"shippingCost": 43000},
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["subtotal"] == 72600
    assert body["tax"] == 7260
    assert body["total"] == 79860
    assert body["doors"][0]["label"] == "WD1 (Toilet)"
    assert body["doors"][0]["detailDrawingUrl"].endswith("KB2200key.pdf")


def test_snapshot(client):
    resp = client.post("/api/snapshot", json={
        "doors": [{"id": "wd-1", "config": HINGED_LOCKED, "price": 29600}],
    })
    assert resp.status_code == 200
    assert resp.json()[0]["lockName"] == "Display lock"


def test_matrix_endpoints(client):
    keys = client.get("/api/matrix/keys").json()
    assert len(keys) == 31
    validation = client.get("/api/matrix/validation").json()
    assert validation["missing"] == []
    assert validation["unknown"] == []


def test_catalog_and_rules(client):
    catalog = client.get("/api/catalog").json()
    assert [o["id"] for o in catalog["locks"]] == ["none", "display-lock"]
    rules = client.get("/api/rules").json()
    assert {r["id"] for r in rules} >= {"door.color", "list.duplicates"}
