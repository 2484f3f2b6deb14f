"""Hotel search service — LLM suggestions enriched with booking links."""

import asyncio
import logging

from luxia.config import Settings
from luxia.exceptions import ConfigurationError
from luxia.schemas.search import HotelSearchRequest
from luxia.services.booking_links import build_fallback_link
from luxia.services.json_recovery import recover_hotels
from luxia.services.llm_client import LLMClient
from luxia.services.prompt_builder import build_prompt
from luxia.services.serp_client import SerpApiClient

logger = logging.getLogger(__name__)


class HotelSearchService:
    """Orchestrates prompt → completion → recovery → link enrichment."""

    def __init__(self, settings: Settings, llm_client: LLMClient, serp_client: SerpApiClient):
        self._settings = settings
        self._llm = llm_client
        self._serp = serp_client

    async def search(self, criteria: HotelSearchRequest) -> list[dict]:
        """Return the model's hotel suggestions, each with a ``booking_link``.

        Raises:
            ConfigurationError: the completion credential is missing.
            CompletionError: the completion call failed.
            RecoveryError: the completion text held no usable array of hotel objects.
        """
        if not self._llm.configured:
            raise ConfigurationError("Completion API key is not configured.")

        prompt = build_prompt(criteria, currency=self._settings.budget_currency)
        text = await self._llm.complete(prompt)

        hotels = recover_hotels(text)
        logger.info(f"Model suggested {len(hotels)} hotels for {criteria.destination}")

        # gather preserves input order whatever order the lookups finish in
        links = await asyncio.gather(
            *(self._resolve_link(hotel, criteria) for hotel in hotels),
            return_exceptions=True,
        )

        enriched = []
        for hotel, link in zip(hotels, links):
            if isinstance(link, BaseException):
                logger.warning(f"Link lookup failed for {hotel.get('name')!r}: {link}")
                link = self._fallback_link(hotel, criteria)
            enriched.append({**hotel, "booking_link": link})
        return enriched

    async def _resolve_link(self, hotel: dict, criteria: HotelSearchRequest) -> str:
        name = hotel.get("name")
        link = None

        if self._serp.configured:
            logger.info(f"Searching booking link for {name!r}")
            link = await self._serp.find_booking_link(
                name, criteria.destination, criteria.checkin, criteria.checkout
            )
            if link:
                logger.info(f"Booking link found for {name!r}: {link}")
            else:
                logger.info(f"No booking link for {name!r}, using fallback")

        return link or self._fallback_link(hotel, criteria)

    def _fallback_link(self, hotel: dict, criteria: HotelSearchRequest) -> str:
        return build_fallback_link(
            hotel.get("name"),
            criteria.destination,
            criteria.checkin,
            criteria.checkout,
            criteria.rooms,
            criteria.adults,
            criteria.children,
            base_url=self._settings.booking_base_url,
            lang=self._settings.booking_lang,
        )
