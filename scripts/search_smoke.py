"""
Live smoke test: one google_search call through the orchestrator, no MCP transport.

Run from the repo root with:
  python scripts/search_smoke.py
  python scripts/search_smoke.py "Your search query here" fr

Requires: GOOGLE_API_KEY, GOOGLE_SEARCH_ENGINE_ID in env (or .env).
Prints the outbound parameters (key masked), the rate gate state, and the tool text.
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add repo root so "google_search_mcp" is importable from scripts/
_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)

from google_search_mcp.config import ConfigurationError, load_settings
from google_search_mcp.main import build_orchestrator
from google_search_mcp.search import SearchError, build_query_params, parse_search_arguments


def _section(title: str) -> None:
    print()
    print("=" * 80)
    print(f"  {title}")
    print("=" * 80)


def main() -> None:
    query = (sys.argv[1] if len(sys.argv) > 1 else "Italian restaurants Boston").strip()
    arguments = {"query": query}
    if len(sys.argv) > 2:
        arguments["language"] = sys.argv[2]

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(e)
        sys.exit(1)

    orchestrator = build_orchestrator(settings)

    _section("Request")
    request = parse_search_arguments(arguments)
    if isinstance(request, SearchError):
        print(f"Invalid arguments: {request.message}")
        sys.exit(1)
    params = build_query_params(request, "***", settings.google_search_engine_id)
    for key, value in params.items():
        print(f"  {key}: {value}")
    print(f"  endpoint: {settings.google_search_endpoint}")
    print(f"  rate gate: {orchestrator.rate_gate.available}/{orchestrator.rate_gate.max_per_minute} tokens")

    _section("Tool result")
    result = orchestrator.search(arguments)
    print(f"is_error: {result.is_error}")
    print(result.text)
    print(f"\nrate gate after: {orchestrator.rate_gate.available} tokens")


if __name__ == "__main__":
    main()
