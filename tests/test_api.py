"""
FastAPI endpoint tests for the Humanize Numbers API.

Uses httpx + FastAPI TestClient, no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from humanize_numbers.config import Settings
from humanize_numbers.models import IntegerWidth

client = TestClient(app)

TOO_BIG = 10**27


@pytest.fixture(autouse=True)
def _settings() -> None:
    """Install default settings for every API test (bypasses lifespan)."""
    api._settings = Settings()
    yield  # type: ignore[misc]
    api._settings = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "usize" in data["widths"]
        assert data["max_spellable"] == "9" * 27

    def test_not_initialised_returns_503(self) -> None:
        api._settings = None
        assert client.get("/health").status_code == 503


class TestHumanizeOne:
    def test_all_forms(self) -> None:
        resp = client.get("/humanize/21")
        assert resp.status_code == 200
        data = resp.json()
        assert data["ordinal"] == "21st"
        assert data["text"] == "twenty-one"
        assert data["intcomma"] == "21"
        assert data["times"] == "twenty-one times"
        assert data["error_code"] is None

    def test_negative(self) -> None:
        data = client.get("/humanize/-1234").json()
        assert data["text"] == "minus one thousand two hundred and thirty-four"
        assert data["intcomma"] == "-1,234"
        assert data["ordinal"] == "-1234th"

    def test_width_is_echoed(self) -> None:
        data = client.get("/humanize/100", params={"width": "u8"}).json()
        assert data["width"] == "u8"

    def test_width_overflow_is_422(self) -> None:
        resp = client.get("/humanize/300", params={"width": "u8"})
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == "WIDTH_OVERFLOW"
        assert body["details"]["max"] == 255

    def test_scale_overflow_is_422(self) -> None:
        resp = client.get(f"/humanize/{TOO_BIG}")
        assert resp.status_code == 422
        assert resp.json()["code"] == "SCALE_OVERFLOW"

    def test_non_integer_path_is_422(self) -> None:
        assert client.get("/humanize/abc").status_code == 422

    def test_unknown_width_is_422(self) -> None:
        assert client.get("/humanize/5", params={"width": "i256"}).status_code == 422

    def test_english_teens_setting(self) -> None:
        api._settings = Settings(english_teens=True)
        assert client.get("/humanize/13").json()["ordinal"] == "13th"

    def test_default_width_setting(self) -> None:
        api._settings = Settings(default_width=IntegerWidth.I8)
        resp = client.get("/humanize/200")
        assert resp.status_code == 422
        assert resp.json()["details"]["width"] == "i8"


class TestHumanizeBatch:
    def test_batch(self) -> None:
        resp = client.post("/humanize", json={"values": [0, 1, 2, 3]})
        assert resp.status_code == 200
        data = resp.json()
        assert [r["times"] for r in data["results"]] == ["never", "once", "twice", "three times"]
        assert data["error_count"] == 0

    def test_failures_reported_per_item(self) -> None:
        data = client.post("/humanize", json={"values": [1, TOO_BIG]}).json()
        assert data["error_count"] == 1
        ok, bad = data["results"]
        assert ok["text"] == "one"
        assert bad["error_code"] == "SCALE_OVERFLOW"
        assert bad["text"] is None
        assert bad["intcomma"] == "1" + ",000" * 9

    def test_width_applies_to_every_value(self) -> None:
        data = client.post("/humanize", json={"values": [255, 256], "width": "u8"}).json()
        assert data["error_count"] == 1
        assert data["results"][0]["text"] == "two hundred and fifty-five"
        assert data["results"][1]["error_code"] == "WIDTH_OVERFLOW"
        assert data["results"][1]["width"] == "u8"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        assert client.post("/humanize", json={}).status_code == 422

    def test_empty_values_returns_422(self) -> None:
        assert client.post("/humanize", json={"values": []}).status_code == 422

    def test_fractional_value_returns_422(self) -> None:
        assert client.post("/humanize", json={"values": [1.5]}).status_code == 422

    def test_boolean_value_returns_422(self) -> None:
        assert client.post("/humanize", json={"values": [True]}).status_code == 422

    def test_numeric_string_value_returns_422(self) -> None:
        assert client.post("/humanize", json={"values": ["12"]}).status_code == 422
