"""
Tests API — catalogues, rendu, édition par chemin, export zip.
"""
import base64
import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from site_builder import __version__
from site_builder.app import app

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
PHOTO_URL = "https://cdn.example.com/me.png"


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# ── Santé + catalogues ───────────────────────────────────────────────────────

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__
    assert body["templates"] >= 6
    assert body["themes"] >= 7


class TestCatalogues:
    def test_templates(self, client):
        r = client.get("/site-builder/templates")
        assert r.status_code == 200
        ids = [t["id"] for t in r.json()["templates"]]
        assert "business-card" in ids and "small-business" in ids

    def test_template_detail(self, client):
        r = client.get("/site-builder/templates/business-card")
        assert r.status_code == 200
        body = r.json()
        assert body["fields"]["avatar"]["section"] == "media"
        assert body["fields"]["theme"]["section"] == "design"
        assert body["sections"]["collections"] == ["contact_info"]
        assert body["defaults"]["name"] == "Alex Morgan"
        assert body["defaults"]["theme"] == "minimal"
        assert body["pages"] == ["index.html"]

    def test_template_detail_unknown(self, client):
        assert client.get("/site-builder/templates/nope").status_code == 404

    def test_themes(self, client):
        r = client.get("/site-builder/themes")
        themes = r.json()["themes"]
        assert themes[0] == {
            "id": "minimal",
            "name": "Minimal",
            "description": "Clean and professional with plenty of whitespace",
        }

    def test_theme_css(self, client):
        r = client.get("/site-builder/themes/retro/css", params={"mode": "auto"})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/css")
        assert "@media (prefers-color-scheme: dark)" in r.text
        assert "@keyframes neon" in r.text

    def test_theme_css_unknown(self, client):
        assert client.get("/site-builder/themes/nope/css").status_code == 404


# ── Rendu ────────────────────────────────────────────────────────────────────

class TestRender:
    def test_render(self, client):
        r = client.post("/site-builder/render", json={
            "template_id": "business-card",
            "data": {"name": "<b>Ada</b>"},
            "theme_id": "brutalist",
            "color_mode": "dark",
        })
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "&lt;b&gt;Ada&lt;/b&gt;" in r.text
        assert "<b>Ada</b>" not in r.text

    def test_render_unknown_template(self, client):
        r = client.post("/site-builder/render", json={"template_id": "nope"})
        assert r.status_code == 404

    def test_render_single_page_of_multi_page(self, client):
        r = client.post(
            "/site-builder/render",
            params={"page": "about.html"},
            json={"template_id": "small-business"},
        )
        assert r.status_code == 200
        assert "<!-- FILE:" not in r.text
        assert "<title>About · Brightside Cleaning</title>" in r.text

    def test_render_unknown_page(self, client):
        r = client.post(
            "/site-builder/render",
            params={"page": "blog.html"},
            json={"template_id": "small-business"},
        )
        assert r.status_code == 404

    def test_render_multi_page_stream(self, client):
        r = client.post("/site-builder/render", json={"template_id": "small-business"})
        assert r.text.count("<!-- FILE:") == 3


# ── Édition ──────────────────────────────────────────────────────────────────

class TestEdit:
    def test_set_group_field(self, client):
        r = client.post("/site-builder/edit", json={
            "data": {"social_links": [{"platform": "GitHub", "url": "https://a.test"}]},
            "path": "social_links[0].url",
            "value": "https://b.test",
        })
        assert r.status_code == 200
        assert r.json()["data"]["social_links"] == [{"platform": "GitHub", "url": "https://b.test"}]

    def test_malformed_path(self, client):
        r = client.post("/site-builder/edit", json={"path": "items[x].", "value": 1})
        assert r.status_code == 400

    def test_append_uses_schema_defaults_and_max(self, client):
        data = {"contact_info": [{"type": "Email", "value": str(i)} for i in range(5)]}
        r = client.post("/site-builder/edit", json={
            "data": data, "path": "contact_info", "op": "append", "template_id": "business-card",
        })
        assert r.json()["data"] == data

        r = client.post("/site-builder/edit", json={
            "data": {"contact_info": []}, "path": "contact_info", "op": "append", "template_id": "business-card",
        })
        assert r.json()["data"]["contact_info"] == [{"type": "Email", "value": ""}]

    def test_remove_respects_min(self, client):
        data = {"contact_info": [{"type": "Email", "value": "a@b.c"}]}
        r = client.post("/site-builder/edit", json={
            "data": data, "path": "contact_info", "op": "remove", "value": 0, "template_id": "business-card",
        })
        assert r.json()["data"] == data

    def test_remove_requires_index(self, client):
        r = client.post("/site-builder/edit", json={"path": "skills", "op": "remove", "value": "x"})
        assert r.status_code == 400


# ── Export ───────────────────────────────────────────────────────────────────

class TestExport:
    def test_export_zip(self, client):
        r = client.post("/site-builder/export", json={
            "template_id": "personal-profile",
            "data": {"name": "Ada", "photo": PHOTO_URL},
            "theme_id": "elegant",
            "assets": {
                "photo": {"data_base64": base64.b64encode(PNG).decode(), "source": PHOTO_URL},
            },
        })
        assert r.status_code == 200
        assert r.headers["content-type"] == "application/zip"
        assert 'filename="personal-profile.zip"' in r.headers["content-disposition"]
        with zipfile.ZipFile(io.BytesIO(r.content)) as zf:
            assert "images/photo_0.png" in zf.namelist()
            assert 'src="./images/photo_0.png"' in zf.read("index.html").decode()

    def test_export_bad_base64(self, client):
        r = client.post("/site-builder/export", json={
            "template_id": "business-card",
            "assets": {"avatar": {"data_base64": "@@not-base64@@"}},
        })
        assert r.status_code == 400

    def test_export_unknown_template(self, client):
        r = client.post("/site-builder/export", json={"template_id": "nope"})
        assert r.status_code == 404
