"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from luxia.exceptions import CompletionError
from luxia.main import create_app
from luxia.services.booking_links import build_fallback_link
from luxia.services.hotel_search_service import HotelSearchService

ORIGIN = "http://localhost:5173"

SEARCH_BODY = {
    "destination": "Hammamet",
    "checkin": "2025-06-01",
    "checkout": "2025-06-08",
    "travelType": "couple",
    "rooms": 1,
    "adults": 2,
    "children": 0,
    "childrenAges": [],
    "budgetMin": 200,
    "budgetMax": 700,
    "stars": 4,
    "amenities": ["Pool"],
    "aiPrompt": "Quiet place",
}


@pytest.fixture
def make_client(make_settings, llm_client, serp_client):
    def _make(**overrides):
        settings = make_settings(**overrides)
        app = create_app(settings)
        app.state.llm_client = llm_client
        app.state.serp_client = serp_client
        app.state.hotel_search_service = HotelSearchService(settings, llm_client, serp_client)
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


class TestSearch:
    def test_success(self, client, hotels_payload):
        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 200
        hotels = resp.json()["hotels"]
        assert [h["name"] for h in hotels] == [h["name"] for h in hotels_payload]
        assert hotels[0]["booking_link"] == build_fallback_link(
            "La Badira", "Hammamet", "2025-06-01", "2025-06-08", 1, 2, 0
        )
        assert (
            "checkin_year=2025&checkin_month=06&checkin_monthday=01" in hotels[0]["booking_link"]
        )

    @pytest.mark.parametrize("field", ["destination", "checkin", "checkout"])
    def test_missing_required_field(self, client, llm_client, serp_client, field):
        body = {k: v for k, v in SEARCH_BODY.items() if k != field}

        resp = client.post("/api/search", json=body)

        assert resp.status_code == 400
        assert field in resp.json()["error"]
        llm_client.complete.assert_not_awaited()
        serp_client.find_booking_link.assert_not_awaited()

    def test_blank_required_field(self, client, llm_client):
        resp = client.post("/api/search", json={**SEARCH_BODY, "destination": "  "})

        assert resp.status_code == 400
        llm_client.complete.assert_not_awaited()

    def test_invalid_field_type(self, client):
        resp = client.post("/api/search", json={**SEARCH_BODY, "rooms": "many"})

        assert resp.status_code == 400
        assert "rooms" in resp.json()["error"]

    def test_missing_completion_credential(self, make_client, llm_client):
        llm_client.configured = False
        client = make_client(groq_api_key="")

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert "error" in resp.json()
        llm_client.complete.assert_not_awaited()

    def test_upstream_status_in_error(self, client, llm_client):
        llm_client.complete.side_effect = CompletionError(
            "Completion service error 401", upstream_status=401
        )

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert resp.json() == {"error": "Completion service error 401"}

    def test_no_array_returns_raw_text(self, client, llm_client):
        llm_client.complete.return_value = "I could not find hotels."

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert resp.json()["raw"] == "I could not find hotels."

    def test_invalid_array_is_reported(self, client, llm_client):
        llm_client.complete.return_value = '```json\n[{"name": "La Badira",}]\n```'

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert resp.json()["error"].startswith("Invalid JSON")

    def test_unexpected_error(self, client, llm_client):
        llm_client.complete.side_effect = KeyError("choices")

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert resp.json() == {"error": "'choices'"}

    def test_unexpected_error_carries_cors_headers(self, client, llm_client):
        llm_client.complete.side_effect = KeyError("choices")

        resp = client.post("/api/search", json=SEARCH_BODY, headers={"Origin": ORIGIN})

        assert resp.status_code == 500
        assert resp.headers.get("access-control-allow-origin") == "*"
        assert resp.json() == {"error": "'choices'"}

    def test_recovery_error_carries_cors_headers(self, client, llm_client):
        llm_client.complete.return_value = "No hotels today."

        resp = client.post("/api/search", json=SEARCH_BODY, headers={"Origin": ORIGIN})

        assert resp.status_code == 500
        assert resp.headers.get("access-control-allow-origin") == "*"

    def test_non_object_entries_return_raw_text(self, client, llm_client, serp_client):
        llm_client.complete.return_value = '["La Badira", "Le Sultan"]'

        resp = client.post("/api/search", json=SEARCH_BODY)

        assert resp.status_code == 500
        assert resp.json()["raw"] == '["La Badira", "Le Sultan"]'
        serp_client.find_booking_link.assert_not_awaited()


def test_liveness(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "luxia"}


class TestDiagnostics:
    def test_both_reachable(self, client, serp_client):
        serp_client.configured = True

        resp = client.get("/test-api")

        assert resp.status_code == 200
        assert resp.json() == {"completion": "ok", "search": "ok"}

    def test_both_unreachable(self, client, llm_client, serp_client):
        serp_client.configured = True
        llm_client.ping.return_value = False
        serp_client.ping.return_value = False

        resp = client.get("/test-api")

        assert resp.status_code == 200
        assert resp.json() == {"completion": "unreachable", "search": "unreachable"}

    def test_nothing_configured(self, client, llm_client, serp_client):
        llm_client.configured = False

        resp = client.get("/test-api")

        assert resp.status_code == 200
        assert resp.json() == {
            "completion": "not configured",
            "search": "not configured (fallback links active)",
        }
        llm_client.ping.assert_not_awaited()
        serp_client.ping.assert_not_awaited()
