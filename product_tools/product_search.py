"""Product search tool backed by the Bloomreach search service."""
from __future__ import annotations

from typing import Any, Dict

import httpx

from .schemas import SearchInput, SearchResult
from .search import search_products
from .tools import Tool


async def _invoke(search_input: SearchInput, client: httpx.AsyncClient | None = None) -> Dict[str, Any]:
    response = await search_products(search_input, client)
    return response.to_dict()


product_search = Tool(
    name="product_search",
    invoke=_invoke,
    description="Search for products using the Bloomreach search service",
    input_schema=SearchInput,
    output_schema=SearchResult,
)
