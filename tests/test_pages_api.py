"""
Tests API pages — POST /api/sites, GET/PATCH /api/pages/{id}, canvas editable
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

TOKEN = "test-token"


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def client(tmp_path):
    """Client de test avec DB SQLite temporaire."""
    os.environ["DB_PATH"] = str(tmp_path / "test.db")
    os.environ["ADMIN_TOKEN"] = TOKEN

    from src.api.main import app
    from src.database import init_db
    init_db()

    with TestClient(app) as c:
        yield c


def _create_site(client, slug="acme") -> dict:
    r = client.post(f"/api/sites?token={TOKEN}", json={"name": "Acme", "slug": slug})
    assert r.status_code == 200
    return r.json()


DOCUMENT = {
    "elements": [{
        "id": "s1", "type": "Section", "content": {}, "styles": {"padding": "2rem", "backgroundColor": "#000000"},
        "children": [
            {"id": "h1", "type": "Heading", "content": {"text": "Bonjour", "level": "h1"}, "styles": {"color": "#ffffff"}},
        ],
    }]
}


# ── Sites ─────────────────────────────────────────────────────────────────

class TestSites:
    def test_create_site_provisions_home_page(self, client):
        site = _create_site(client)
        assert site["slug"] == "acme"
        assert len(site["pages"]) == 1
        home = site["pages"][0]
        assert home["title"] == "Home"
        assert home["slug"] == "home"
        assert home["status"] == "draft"
        assert home["content"] == {"elements": []}

    def test_duplicate_slug_409(self, client):
        _create_site(client)
        r = client.post(f"/api/sites?token={TOKEN}", json={"name": "Autre", "slug": "acme"})
        assert r.status_code == 409

    def test_bad_token_403(self, client):
        r = client.post("/api/sites?token=faux", json={"name": "Acme", "slug": "acme"})
        assert r.status_code == 403

    def test_list_pages(self, client):
        site = _create_site(client)
        r = client.post(f"/api/sites/{site['id']}/pages?token={TOKEN}", json={"title": "Contact", "slug": "contact"})
        assert r.status_code == 200
        r = client.get(f"/api/sites/{site['id']}/pages?token={TOKEN}")
        assert r.status_code == 200
        assert [p["slug"] for p in r.json()["pages"]] == ["home", "contact"]

    def test_list_pages_unknown_site_404(self, client):
        assert client.get(f"/api/sites/inexistant/pages?token={TOKEN}").status_code == 404

    def test_duplicate_page_slug_409(self, client):
        site = _create_site(client)
        r = client.post(f"/api/sites/{site['id']}/pages?token={TOKEN}", json={"title": "Home 2", "slug": "home"})
        assert r.status_code == 409


# ── Pages ─────────────────────────────────────────────────────────────────

class TestPages:
    def test_get_page(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.get(f"/api/pages/{page_id}?token={TOKEN}")
        assert r.status_code == 200
        body = r.json()
        assert body["id"] == page_id
        assert body["aiSeoScore"] == 0
        assert body["focusKeywords"] == []

    def test_get_unknown_page_404(self, client):
        assert client.get(f"/api/pages/inexistant?token={TOKEN}").status_code == 404

    def test_token_from_cookie(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        client.cookies.set("admin_token", TOKEN)
        assert client.get(f"/api/pages/{page_id}").status_code == 200

    def test_patch_saves_content_and_metadata(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={
            "title": "Accueil",
            "status": "published",
            "metaTitle": "Accueil | Acme",
            "focusKeywords": ["acme", "accueil"],
            "aiSeoScore": 91,
            "content": DOCUMENT,
        })
        assert r.status_code == 200
        body = client.get(f"/api/pages/{page_id}?token={TOKEN}").json()
        assert body["title"] == "Accueil"
        assert body["status"] == "published"
        assert body["metaTitle"] == "Accueil | Acme"
        assert body["focusKeywords"] == ["acme", "accueil"]
        assert body["aiSeoScore"] == 91
        assert body["content"] == DOCUMENT

    def test_patch_partial_keeps_other_fields(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"content": DOCUMENT})
        client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"title": "Nouveau"})
        body = client.get(f"/api/pages/{page_id}?token={TOKEN}").json()
        assert body["title"] == "Nouveau"
        assert body["content"] == DOCUMENT

    def test_patch_malformed_content_422(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={
            "content": {"elements": [{"id": "x", "type": "Carousel", "content": {}, "styles": {}}]},
        })
        assert r.status_code == 422

    def test_patch_bad_status_422(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"status": "archived"})
        assert r.status_code == 422

    @pytest.mark.parametrize("field", ["title", "slug", "status", "aiSeoScore"])
    def test_patch_null_required_field_422(self, client, field):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={field: None})
        assert r.status_code == 422
        body = client.get(f"/api/pages/{page_id}?token={TOKEN}").json()
        assert body["title"] == "Home"
        assert body["slug"] == "home"

    def test_patch_null_optional_field_clears_it(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"metaTitle": "Accueil | Acme"})
        r = client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"metaTitle": None})
        assert r.status_code == 200
        assert r.json()["metaTitle"] is None

    def test_patch_unknown_page_404(self, client):
        r = client.patch(f"/api/pages/inexistant?token={TOKEN}", json={"title": "x"})
        assert r.status_code == 404

    def test_patch_bad_token_403(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.patch(f"/api/pages/{page_id}?token=faux", json={"title": "x"})
        assert r.status_code == 403


# ── Canvas editable ───────────────────────────────────────────────────────

class TestCanvas:
    def test_canvas_has_editor_affordances(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        client.patch(f"/api/pages/{page_id}?token={TOKEN}", json={"content": DOCUMENT})
        r = client.get(f"/api/pages/{page_id}/canvas?token={TOKEN}&selected=h1")
        assert r.status_code == 200
        assert 'data-cb-id="h1"' in r.text
        assert "HEADING (H1)" in r.text
        assert 'data-cb-drop="placeholder-root"' in r.text

    def test_empty_canvas_shows_root_placeholder(self, client):
        page_id = _create_site(client)["pages"][0]["id"]
        r = client.get(f"/api/pages/{page_id}/canvas?token={TOKEN}")
        assert "Drag module here" in r.text
