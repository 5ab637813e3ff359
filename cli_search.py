"""Terminal client that runs the product search tool in-process."""
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Iterable

from product_tools.product_search import product_search
from product_tools.tools import ToolResult

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


async def perform_query(query: str, filter_query: str | None = None) -> ToolResult:
    tool_input = {"search_query": query}
    if filter_query:
        tool_input["filter_query"] = filter_query
    return await product_search.run(tool_input)


def pretty_print_response(query: str, outcome: ToolResult) -> None:
    if not outcome.ok:
        print(f"Query: {query} | {RED}error: {outcome.error}{RESET}")
        return
    products = outcome.result["products"]
    facets = outcome.result["facets"]
    print(f"Query: {query} | {GREEN}products: {len(products)}{RESET} | facets: {len(facets)}")
    for idx, item in enumerate(products, start=1):
        print(f"  {idx:02d}. {item['price']:>8.2f} | {item['department'] or '-'} | {item['title']} | {item['url']}")
    for facet in facets:
        print(f"  [{facet['name']}] {', '.join(facet['values'])}")


def interactive_shell() -> None:
    print("Interactive product search. Type 'exit' to quit.")
    while True:
        try:
            query = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not query:
            continue
        if query.lower() in {"exit", "quit"}:
            return
        pretty_print_response(query, asyncio.run(perform_query(query)))


def batch_mode(file_path: Path) -> None:
    with file_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            query = line.strip()
            if not query:
                continue
            pretty_print_response(query, asyncio.run(perform_query(query)))


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the product search tool")
    parser.add_argument("query", nargs="?", help="Query string. If omitted, starts REPL mode.")
    parser.add_argument("--filter", dest="filter_query", help="Comma separated facetName:facetValue pairs")
    parser.add_argument("--batch", type=Path, help="File with queries to execute line by line")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.batch:
        batch_mode(args.batch)
        return 0
    if args.query:
        outcome = asyncio.run(perform_query(args.query, args.filter_query))
        pretty_print_response(args.query, outcome)
        return 0 if outcome.ok else 1
    interactive_shell()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
