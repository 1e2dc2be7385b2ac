"""Tests router FastAPI /canvas."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from canvas_builder.router import router


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


DOCUMENT = {
    "elements": [{
        "id": "s1", "type": "Section", "content": {}, "styles": {"backgroundColor": "#f9fafb"},
        "children": [
            {"id": "h1", "type": "Heading", "content": {"text": "Bonjour", "level": "h1"}, "styles": {}},
        ],
    }]
}


def test_render_returns_live_html(client):
    r = client.post("/canvas/render", json=DOCUMENT)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Bonjour</h1>" in r.text
    assert "background-color:#f9fafb" in r.text
    assert "cb-" not in r.text


def test_render_unknown_type_422(client):
    r = client.post("/canvas/render", json={"elements": [{"id": "x", "type": "Video", "content": {}, "styles": {}}]})
    assert r.status_code == 422


def test_validate_valid_document(client):
    assert client.post("/canvas/validate", json=DOCUMENT).json() == {"valid": True}


def test_validate_bad_format(client):
    data = client.post("/canvas/validate", json={"elements": [{"id": "x", "type": "Video"}]}).json()
    assert data["valid"] is False
    assert data["errors"]


def test_validate_nested_section(client):
    doc = {"elements": [{
        "id": "s1", "type": "Section", "content": {}, "styles": {},
        "children": [{"id": "s2", "type": "Section", "content": {}, "styles": {}, "children": []}],
    }]}
    data = client.post("/canvas/validate", json=doc).json()
    assert data["valid"] is False
    assert any("s2" in e for e in data["errors"])


def test_catalog_lists_all_variants(client):
    data = client.get("/canvas/catalog").json()
    by_type = {e["type"]: e for e in data["elements"]}
    assert set(by_type) == {"Section", "Grid", "Column", "Heading", "Text", "Button", "Image"}
    assert by_type["Grid"]["container"] is True
    assert by_type["Heading"]["container"] is False
    assert len(by_type["Grid"]["defaults"]["children"]) == 2
    assert by_type["Button"]["defaults"]["content"] == {"text": "Click Me", "url": "#"}
