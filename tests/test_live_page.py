"""
Tests page live — GET /live/{site_slug}/{page_slug}
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

TOKEN = "test-token"


@pytest.fixture
def client(tmp_path):
    os.environ["DB_PATH"] = str(tmp_path / "test.db")
    os.environ["ADMIN_TOKEN"] = TOKEN

    from src.api.main import app
    from src.database import init_db
    init_db()

    with TestClient(app) as c:
        yield c


@pytest.fixture
def home_page_id(client):
    r = client.post(f"/api/sites?token={TOKEN}", json={"name": "Acme", "slug": "acme"})
    return r.json()["pages"][0]["id"]


def test_empty_page_renders(client, home_page_id):
    r = client.get("/live/acme/home")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert '<main class="canvas-root">' in r.text


def test_live_page_has_no_editor_affordances(client, home_page_id):
    client.patch(f"/api/pages/{home_page_id}?token={TOKEN}", json={"content": {"elements": [
        {"id": "b1", "type": "Button", "content": {"text": "Réserver", "url": "/booking"}, "styles": {}},
    ]}})
    r = client.get("/live/acme/home")
    assert '<a href="/booking"' in r.text
    assert "Réserver</a>" in r.text
    assert "cb-" not in r.text
    assert "onclick" not in r.text


def test_live_page_seo_tags(client, home_page_id):
    client.patch(f"/api/pages/{home_page_id}?token={TOKEN}", json={
        "metaTitle": "Acme | Accueil",
        "metaDescription": "Le site Acme.",
        "focusKeywords": ["acme"],
    })
    r = client.get("/live/acme/home")
    assert "<title>Acme | Accueil</title>" in r.text
    assert '<meta name="description" content="Le site Acme.">' in r.text
    assert '<meta name="keywords" content="acme">' in r.text


def test_live_is_public(client, home_page_id):
    client.cookies.clear()
    assert client.get("/live/acme/home?token=faux").status_code == 200


def test_unknown_site_404(client):
    assert client.get("/live/inexistant/home").status_code == 404


def test_unknown_page_404(client, home_page_id):
    assert client.get("/live/acme/inexistante").status_code == 404
