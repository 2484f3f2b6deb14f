from fastapi import Request

from luxia.services.hotel_search_service import HotelSearchService
from luxia.services.llm_client import LLMClient
from luxia.services.serp_client import SerpApiClient


def get_hotel_search_service(request: Request) -> HotelSearchService:
    return request.app.state.hotel_search_service


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm_client


def get_serp_client(request: Request) -> SerpApiClient:
    return request.app.state.serp_client
