"""Diagnostics router — reachability of the upstream services."""

import asyncio

from fastapi import APIRouter, Depends

from luxia.dependencies import get_llm_client, get_serp_client
from luxia.services.llm_client import LLMClient
from luxia.services.serp_client import SerpApiClient

router = APIRouter()

STATUS_OK = "ok"
STATUS_UNREACHABLE = "unreachable"
STATUS_NOT_CONFIGURED = "not configured"
STATUS_SEARCH_NOT_CONFIGURED = "not configured (fallback links active)"


async def _completion_status(llm_client: LLMClient) -> str:
    if not llm_client.configured:
        return STATUS_NOT_CONFIGURED
    return STATUS_OK if await llm_client.ping() else STATUS_UNREACHABLE


async def _search_status(serp_client: SerpApiClient) -> str:
    if not serp_client.configured:
        return STATUS_SEARCH_NOT_CONFIGURED
    return STATUS_OK if await serp_client.ping() else STATUS_UNREACHABLE


@router.get("/test-api")
async def test_api(
    llm_client: LLMClient = Depends(get_llm_client),
    serp_client: SerpApiClient = Depends(get_serp_client),
):
    """Probe both upstream services; always answers 200."""
    completion, search = await asyncio.gather(
        _completion_status(llm_client), _search_status(serp_client)
    )
    return {"completion": completion, "search": search}
