from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from adapters.entry.http.views import chains_view
from core.use_cases.chain_registry_usecase import ChainRegistryUseCase
from main import create_app


@pytest.fixture
def client(arbitrum_table):
    app = create_app()
    app.dependency_overrides[chains_view.get_use_case] = lambda: ChainRegistryUseCase(table=arbitrum_table)
    with TestClient(app) as c:
        yield c


def test_list_chains(client):
    resp = client.get("/api/chains")

    assert resp.status_code == 200
    assert resp.json()["data"] == [{"id": 42161, "name": "arbitrum"}]


def test_get_chain(client):
    resp = client.get("/api/chains/42161")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["id"] == 42161
    assert data["lens_contract"]["block"] == 2_396_321
    assert len(data["registries"]) == 4


def test_get_unknown_chain_is_404(client):
    resp = client.get("/api/chains/250")

    assert resp.status_code == 404


def test_registries_hide_disabled_by_default(client):
    active = client.get("/api/chains/42161/registries").json()["data"]
    everything = client.get("/api/chains/42161/registries", params={"include_disabled": True}).json()["data"]

    assert len(active) == 3
    assert "DISABLED" not in {r["tag"] for r in active}
    assert len(everything) == 4


def test_normalize_strategies_filters_by_condition(client):
    body = [
        {"address": "0x1f8ad2cec4a2595ff3cda9e8a39c0b1be1a02014", "name": "A", "lastTotalDebt": "100", "isInQueue": True},
        {"address": "0x2f8ad2cec4a2595ff3cda9e8a39c0b1be1a02014", "name": "B", "lastTotalDebt": 0},
    ]

    resp = client.post("/api/strategies/normalize", params={"condition": "absolute"}, json=body)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [s["name"] for s in data] == ["A"]
    assert data[0]["status"] == "active"
    assert data[0]["details"]["totalDebt"] == "100"
    assert "inQueue" not in resp.text


def test_normalize_strategies_unknown_condition_returns_nothing(client):
    body = [{"name": "A", "lastTotalDebt": 1}]

    resp = client.post("/api/strategies/normalize", params={"condition": "everything"}, json=body)

    assert resp.status_code == 200
    assert resp.json()["data"] == []


def test_chain_views_use_the_table_built_at_startup(arbitrum_table):
    app = create_app()
    with TestClient(app) as c:
        app.state.chain_table = arbitrum_table

        chains = c.get("/api/chains").json()["data"]
        missing = c.get("/api/chains/1")

    assert chains == [{"id": 42161, "name": "arbitrum"}]
    assert missing.status_code == 404
