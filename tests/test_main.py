"""HTTP host for the registered tools."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from product_tools import main as main_module
from product_tools import search as search_module
from product_tools.config import Settings

REGISTRY = Path(__file__).resolve().parents[1] / "assets" / "functions.json"


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(main_module, "settings", Settings(registry_path=str(REGISTRY)))
    with TestClient(main_module.app) as test_client:
        yield test_client


def test_health_lists_registered_tools(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["tools"] == ["product_search"]


def test_tools_endpoint_returns_definitions(client):
    tools = client.get("/tools").json()["tools"]

    assert [tool["name"] for tool in tools] == ["product_search"]
    assert tools[0]["inputSchema"]["required"] == ["search_query"]


def test_invoke_returns_result(client, monkeypatch: pytest.MonkeyPatch):
    async def fake_fetch(http_client, search_query, filter_query=None):
        return {
            "response": {"docs": [{"title": search_query, "url": "http://x/1", "thumb_image": "http://x/1.jpg"}]},
            "facet_counts": {"facet_fields": {"department": [{"name": "Wine"}]}},
        }

    monkeypatch.setattr(search_module, "fetch_search_payload", fake_fetch)

    body = client.post("/tools/product_search", json={"search_query": "merlot"}).json()

    assert body["result"]["products"][0]["title"] == "merlot"
    assert body["result"]["facets"] == [{"name": "department", "values": ["Wine"]}]


def test_invoke_reports_errors(client, monkeypatch: pytest.MonkeyPatch):
    async def failing_fetch(http_client, search_query, filter_query=None):
        raise RuntimeError("backend down")

    monkeypatch.setattr(search_module, "fetch_search_payload", failing_fetch)

    body = client.post("/tools/product_search", json={"search_query": "merlot"}).json()

    assert body == {"error": "backend down"}


def test_unknown_tool_is_404(client):
    response = client.post("/tools/nope", json={})

    assert response.status_code == 404
