"""Product search against the configured Solr-style backend."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, List, Tuple

import httpx

from .config import settings
from .models import SearchResponse
from .schemas import SearchInput

logger = logging.getLogger(__name__)


def _build_params(search_query: str, filter_query: str | None) -> List[Tuple[str, str]]:
    params = settings.static_params()
    params.append((settings.search_query_param, search_query))
    if filter_query and settings.search_filter_param:
        params.append((settings.search_filter_param, filter_query))
    elif filter_query:
        logger.debug("filter_query=%r not forwarded; SEARCH_FILTER_PARAM is unset", filter_query)
    return params


async def fetch_search_payload(
    client: httpx.AsyncClient, search_query: str, filter_query: str | None = None
) -> Any:
    """Issue the single backend request and return the decoded JSON body."""
    params = _build_params(search_query, filter_query)
    response = await client.get(settings.search_url, params=params)
    response.raise_for_status()
    return response.json()


async def search_products(
    search_input: SearchInput, client: httpx.AsyncClient | None = None
) -> SearchResponse:
    if client is None:
        async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as owned:
            return await search_products(search_input, owned)

    started = perf_counter()
    payload = await fetch_search_payload(client, search_input.search_query, search_input.filter_query)
    result = SearchResponse.from_dict(payload)
    logger.info(
        "search q=%r products=%s facets=%s took=%.1fms",
        search_input.search_query,
        len(result.products),
        len(result.facets),
        (perf_counter() - started) * 1000,
    )
    return result
