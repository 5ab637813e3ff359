"""Tool manifest generation from the tool registry.

The registry is a JSON document listing every tool to publish::

    {"exports": [{"id": "product_search", "virtualPath": "product_tools.product_search"}]}

``virtualPath`` is either a dotted module path or a ``.py`` file relative to
the project root. Each tool's pydantic schemas are converted to JSON Schema and
written as YAML under a top-level ``tools`` key, in registry order.
"""
from __future__ import annotations

import importlib
import importlib.util
import json
import logging
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Optional, Tuple, TypedDict

import yaml

from .schemas import portable_schema
from .tools import Tool

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    """The tool registry could not be read or has the wrong shape."""


class ToolDefinition(TypedDict):
    name: str
    description: str
    inputSchema: Dict[str, Any]
    outputSchema: Dict[str, Any]


@dataclass(frozen=True)
class RegistryEntry:
    tool_id: str
    load_target: str


def load_registry(path: str | Path) -> List[RegistryEntry]:
    registry_path = Path(path)
    try:
        with registry_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise RegistryError(f"Failed to read tool registry {registry_path}: {exc}") from exc

    exports = data.get("exports") if isinstance(data, dict) else None
    if not isinstance(exports, list):
        raise RegistryError(f"Tool registry {registry_path} has no 'exports' list")

    entries: List[RegistryEntry] = []
    for item in exports:
        try:
            entries.append(RegistryEntry(tool_id=str(item["id"]), load_target=str(item["virtualPath"])))
        except (KeyError, TypeError) as exc:
            raise RegistryError(f"Malformed registry entry {item!r} in {registry_path}") from exc
    return entries


def _load_file(path: Path) -> ModuleType:
    module_name = "_registry_tool_" + re.sub(r"\W", "_", str(path.with_suffix("")))
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module


class ModuleCache:
    """Loads each registry target once per manifest run."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self._modules: Dict[str, Optional[ModuleType]] = {}

    def load(self, target: str) -> Optional[ModuleType]:
        if target not in self._modules:
            self._modules[target] = self._import(target)
        return self._modules[target]

    def _import(self, target: str) -> Optional[ModuleType]:
        try:
            if target.endswith(".py"):
                return _load_file(self.root / target)
            return importlib.import_module(target)
        except Exception as exc:
            logger.warning("Failed to load %s: %s", target, exc)
            return None


def resolve_tools(
    entries: List[RegistryEntry], cache: ModuleCache, *, require_schemas: bool = True
) -> List[Tuple[str, Tool]]:
    resolved: List[Tuple[str, Tool]] = []
    for entry in entries:
        logger.info("Loading tool: %s from %s", entry.tool_id, entry.load_target)
        module = cache.load(entry.load_target)
        candidate = getattr(module, entry.tool_id, None) if module is not None else None
        if not isinstance(candidate, Tool):
            logger.warning("Module or function %s not found at %s", entry.tool_id, entry.load_target)
            continue
        if require_schemas and (candidate.input_schema is None or candidate.output_schema is None):
            logger.debug(
                "Tool %s does not have inputSchema or outputSchema defined; skipping", entry.tool_id
            )
            continue
        resolved.append((entry.tool_id, candidate))
    return resolved


def to_tool_definition(tool_id: str, tool: Tool) -> ToolDefinition:
    return {
        "name": tool_id,
        "description": tool.description or f"Tool for {tool_id}",
        "inputSchema": portable_schema(tool.input_schema),
        "outputSchema": portable_schema(tool.output_schema),
    }


def build_manifest(entries: List[RegistryEntry], root: str | Path = ".") -> Dict[str, List[ToolDefinition]]:
    cache = ModuleCache(root)
    tools = [to_tool_definition(tool_id, tool) for tool_id, tool in resolve_tools(entries, cache)]
    return {"tools": tools}


def write_manifest(manifest: Dict[str, Any], path: str | Path) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(manifest, sort_keys=False, allow_unicode=True, default_flow_style=False)
    output_path.write_text(text, encoding="utf-8")
    return output_path


def generate(registry_path: str | Path, output_path: str | Path, root: str | Path = ".") -> Dict[str, Any]:
    """Build the manifest for every registered tool and write it to ``output_path``.

    Raises ``RegistryError`` when the registry itself is unusable. Tools that
    cannot be loaded or lack schemas are logged and left out.
    """
    logger.info("Generating tool schemas from %s", registry_path)
    entries = load_registry(registry_path)
    manifest = build_manifest(entries, root)
    written = write_manifest(manifest, output_path)
    logger.info("Wrote %s tool schemas to %s", len(manifest["tools"]), written)
    return manifest
