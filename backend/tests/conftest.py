import json
from unittest.mock import AsyncMock, Mock

import pytest

from luxia.config import Settings
from luxia.schemas.search import HotelSearchRequest


@pytest.fixture
def make_settings():
    """Build Settings isolated from the environment and any .env file."""

    def _make(**overrides):
        values = {"groq_api_key": "groq-test-key", "serp_api_key": "", "cors_origins": "*", **overrides}
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def criteria():
    return HotelSearchRequest(
        destination="Hammamet",
        checkin="2025-06-01",
        checkout="2025-06-08",
        rooms=1,
        adults=2,
        children=0,
    )


@pytest.fixture
def hotels_payload():
    return [
        {
            "name": "La Badira",
            "stars": 5,
            "address": "Route Touristique Hammamet Nord",
            "price_per_night": 650,
            "currency": "DT",
            "description": "Adults-only seafront hotel.",
            "highlights": ["Sea view", "Spa"],
            "amenities": ["Pool", "Spa"],
            "rating": 9.1,
            "image_url": "",
        },
        {
            "name": "Le Sultan",
            "stars": 5,
            "address": "Avenue des Nations Unies, Hammamet",
            "price_per_night": 480,
            "currency": "DT",
            "description": "Beachfront resort.",
            "highlights": ["Private beach"],
            "amenities": ["Pool"],
            "rating": 8.7,
            "image_url": "",
        },
        {
            "name": "Hotel Bel Azur",
            "stars": 4,
            "address": "Boulevard Assad Ibn Fourat, Hammamet",
            "price_per_night": 300,
            "currency": "DT",
            "description": "Family hotel with gardens.",
            "highlights": ["Gardens"],
            "amenities": ["Pool", "Kids club"],
            "rating": 8.2,
            "image_url": "",
        },
    ]


@pytest.fixture
def completion_text(hotels_payload):
    return "```json\n" + json.dumps(hotels_payload, ensure_ascii=False) + "\n```"


@pytest.fixture
def llm_client(completion_text):
    client = Mock()
    client.configured = True
    client.complete = AsyncMock(return_value=completion_text)
    client.ping = AsyncMock(return_value=True)
    return client


@pytest.fixture
def serp_client():
    client = Mock()
    client.configured = False
    client.find_booking_link = AsyncMock(return_value=None)
    client.ping = AsyncMock(return_value=True)
    return client
