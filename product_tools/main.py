"""FastAPI application hosting the registered tools."""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException

from .config import settings
from .manifest import ModuleCache, load_registry, resolve_tools, to_tool_definition
from .tools import Tool

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

# Force a predictable logging setup even when run under uvicorn. ``force=True``
# replaces uvicorn's default handlers.
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Product Tools Host")
app.state.tools = {}


def _tools() -> Dict[str, Tool]:
    return app.state.tools


@app.on_event("startup")
async def startup_event() -> None:
    entries = load_registry(settings.registry_path)
    resolved = resolve_tools(entries, ModuleCache(), require_schemas=False)
    app.state.tools = dict(resolved)
    logger.info("Serving %s tools from %s", len(resolved), settings.registry_path)


@app.get("/health")
async def health() -> dict:
    return {"tools": sorted(_tools()), "search_url": settings.search_url}


@app.get("/tools")
async def list_tools() -> dict:
    definitions = [
        to_tool_definition(tool_id, tool)
        for tool_id, tool in _tools().items()
        if tool.input_schema is not None and tool.output_schema is not None
    ]
    return {"tools": definitions}


@app.post("/tools/{tool_id}")
async def invoke_tool(tool_id: str, tool_input: Dict[str, Any] = Body(...)) -> dict:
    tool = _tools().get(tool_id)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool {tool_id}")
    outcome = await tool.run(tool_input)
    if not outcome.ok:
        return {"error": outcome.error}
    return {"result": outcome.result}
