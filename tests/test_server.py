"""
Tests for the Flask endpoints in server.py
"""

import pytest

import server
from bidi_styles.config import Settings


def _settings(**overrides):
    values = dict(
        rtl_enabled=True,
        rtl_selector='[dir="rtl"]',
        breakpoints="xs:0,sm:576px,md:768px,lg:992px,xl:1200px",
        log_level="INFO",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    return server.create_app(_settings()).test_client()


class TestResolveEndpoint:
    def test_padding(self, client):
        response = client.post(
            "/resolve/padding",
            json={"start": "10px", "end": "20px", "top": "5px", "bottom": "5px", "parent_selector": ".card"},
        )
        assert response.status_code == 200
        data = response.get_json()
        assert [d["property"] for d in data["declarations"]] == [
            "padding-left", "padding-right", "padding-top", "padding-bottom",
        ]
        assert data["override"]["declarations"] == [
            {"property": "padding-right", "value": "10px"},
            {"property": "padding-left", "value": "20px"},
        ]
        assert '[dir="rtl"] .card {' in data["css"]

    def test_text_align(self, client):
        data = client.post("/resolve/text-align", json={"value": "start", "modifier": "!important"}).get_json()
        assert [d["value"] for d in data["declarations"]] == ["left", "start !important"]
        assert data["override"] is None

    def test_border_radius(self, client):
        data = client.post("/resolve/border-radius", json={"top_start": "4px"}).get_json()
        assert data["declarations"] == [{"property": "border-top-left-radius", "value": "4px"}]

    def test_invalid_value(self, client):
        response = client.post("/resolve/margin", json={"start": [1, 2]})
        assert response.status_code == 400
        assert "start" in response.get_json()["error"]

    def test_unknown_operation(self, client):
        assert client.post("/resolve/float", json={}).status_code == 404

    def test_rtl_disabled(self):
        client = server.create_app(_settings(rtl_enabled=False)).test_client()
        data = client.post("/resolve/position", json={"start": "0"}).get_json()
        assert data["override"] is None


class TestBreakpointEndpoints:
    def test_list(self, client):
        data = client.get("/breakpoints").get_json()
        assert [b["name"] for b in data["breakpoints"]] == ["xs", "sm", "md", "lg", "xl"]
        assert data["warnings"] == []

    def test_list_reports_warnings(self):
        client = server.create_app(_settings(breakpoints="sm:576px,md:768px")).test_client()
        warnings = client.get("/breakpoints").get_json()["warnings"]
        assert [w["kind"] for w in warnings] == ["nonzero_start"]

    def test_detail(self, client):
        data = client.get("/breakpoints/sm").get_json()
        assert data == {
            "name": "sm",
            "min_width": "576px",
            "max_width": "767px",
            "next": "md",
            "infix": "-sm",
            "media_up": "@media (min-width: 576px)",
            "media_down": "@media (max-width: 767px)",
        }

    def test_detail_open_ends(self, client):
        assert client.get("/breakpoints/xs").get_json()["media_up"] is None
        assert client.get("/breakpoints/xl").get_json()["media_down"] is None

    def test_unknown(self, client):
        assert client.get("/breakpoints/xxl").status_code == 404


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


class TestResolveDocument:
    def test_html(self, client):
        response = client.post("/resolveDocument", json={"html": '<body dir="rtl"><p class="ps-2">a</p></body>'})
        assert response.status_code == 200
        paragraph = response.get_json()["children"][0]
        assert paragraph["direction"] == "rtl"
        assert paragraph["styles"] == {"padding-left": "initial", "padding-right": "0.5rem"}

    def test_url(self, client, monkeypatch):
        monkeypatch.setattr(server.requests, "get", lambda url, headers: FakeResponse(200, "<body><p>x</p></body>"))
        data = client.post("/resolveDocument", json={"url": "https://example.com"}).get_json()
        assert data["children"][0]["text"] == "x"

    def test_url_failure(self, client, monkeypatch):
        monkeypatch.setattr(server.requests, "get", lambda url, headers: FakeResponse(503))
        response = client.post("/resolveDocument", json={"url": "https://example.com"})
        assert response.status_code == 503

    def test_missing_input(self, client):
        assert client.post("/resolveDocument", json={}).status_code == 400


class TestRequestBodies:
    @pytest.mark.parametrize("body", [["x"], "padding", 3])
    def test_resolve_rejects_non_object_json(self, client, body):
        response = client.post("/resolve/padding", json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "Request body must be a JSON object"

    def test_resolve_rejects_non_string_selector(self, client):
        response = client.post("/resolve/margin", json={"start": "1px", "selector": 5})
        assert response.status_code == 400
        assert "selector" in response.get_json()["error"]

    def test_resolve_document_rejects_non_object_json(self, client):
        assert client.post("/resolveDocument", json=["url"]).status_code == 400

    def test_empty_body_resolves_to_empty_rule_set(self, client):
        data = client.post("/resolve/padding").get_json()
        assert data["declarations"] == []
        assert data["override"] is None
