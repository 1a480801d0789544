"""
Tests des helpers de montage FastAPI (create_site_route, SiteRouter).
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from site_builder.core.errors import UnknownTemplateError
from site_builder.fastapi_integration import SiteRouter, create_site_route


def test_create_site_route_reads_data_per_request():
    app = FastAPI()
    state = {"name": "Ada"}
    create_site_route(app, "/card", "business-card", lambda: dict(state), theme_id="minimal")

    with TestClient(app) as client:
        assert "<title>Ada</title>" in client.get("/card").text
        state["name"] = "Grace"
        assert "<title>Grace</title>" in client.get("/card").text


def test_create_site_route_unknown_template_fails_at_startup():
    with pytest.raises(UnknownTemplateError):
        create_site_route(FastAPI(), "/", "nope", dict)


def test_create_site_route_unknown_page():
    with pytest.raises(ValueError, match="Page inconnue"):
        create_site_route(FastAPI(), "/", "business-card", dict, page="about.html")


class TestSiteRouter:
    def test_routes(self):
        site = SiteRouter("small-business", dict)
        assert site.routes("/demo/") == {
            "/demo/": "index.html",
            "/demo/index.html": "index.html",
            "/demo/about.html": "about.html",
            "/demo/contact.html": "contact.html",
        }

    def test_register_serves_every_page(self):
        app = FastAPI()
        SiteRouter("small-business", dict, theme_id="elegant", color_mode="light").register(app, "/demo")
        with TestClient(app) as client:
            home = client.get("/demo/")
            about = client.get("/demo/about.html")
            contact = client.get("/demo/contact.html")
        assert home.status_code == about.status_code == contact.status_code == 200
        assert "<title>Brightside Cleaning</title>" in home.text
        assert "<title>About · Brightside Cleaning</title>" in about.text
        assert "mailto:hello@brightside.example" in contact.text
        assert '<meta name="color-scheme" content="light">' in home.text
