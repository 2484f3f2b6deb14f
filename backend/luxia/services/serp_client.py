"""SerpAPI client — resolves a real booking link for a suggested hotel."""

import logging

import httpx

from luxia.config import Settings

logger = logging.getLogger(__name__)

SEARCH_SITES = ("booking.com", "expedia.com", "hotels.com")

# Checked in order against each result's link; first match wins
PREFERRED_LINK_MARKERS = (
    "booking.com/hotel",
    "expedia.com",
    "hotels.com",
    "tripadvisor",
)


def build_query(hotel_name: str, destination: str) -> str:
    sites = " OR ".join(f"site:{site}" for site in SEARCH_SITES)
    return f"{hotel_name} {destination} réservation booking {sites}"


def select_booking_link(results: list[dict]) -> str | None:
    """Pick the first result on a preferred domain, else the first result."""
    for result in results:
        link = result.get("link") or ""
        if any(marker in link for marker in PREFERRED_LINK_MARKERS):
            return link

    if results:
        return results[0].get("link")
    return None


class SerpApiClient:
    """Adapter for the SerpAPI Google search endpoint."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return self._settings.search_enabled

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._settings.http_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def find_booking_link(
        self,
        hotel_name: str,
        destination: str,
        checkin: str | None = None,
        checkout: str | None = None,
    ) -> str | None:
        """Search for a booking page for ``hotel_name``.

        Stay dates are accepted for interface symmetry with the fallback
        link but are not part of the query. Never raises: any failure is
        reported as ``None``.
        """
        params = {
            "q": build_query(hotel_name, destination),
            "api_key": self._settings.serp_api_key,
            "num": self._settings.serp_num_results,
            "hl": self._settings.serp_language,
        }

        try:
            client = await self._get_client()
            resp = await client.get(self._settings.serp_base_url, params=params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            # str(e) carries the request URL, api_key included
            logger.warning(f"SerpAPI returned {e.response.status_code} for {hotel_name!r}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"SerpAPI lookup failed for {hotel_name!r}: {type(e).__name__}")
            return None

        results = data.get("organic_results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            return None
        return select_booking_link([r for r in results if isinstance(r, dict)])

    async def ping(self) -> bool:
        """Minimal search used by the diagnostics endpoint."""
        try:
            client = await self._get_client()
            resp = await client.get(
                self._settings.serp_base_url,
                params={"q": "test", "api_key": self._settings.serp_api_key, "num": 1},
            )
            return resp.is_success
        except Exception as e:
            logger.warning(f"SerpAPI probe failed: {type(e).__name__}")
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
