"""
google-search MCP server entry point: configuration, wiring, and the stdio transport.
"""

import logging
import sys

import anyio

from google_search_mcp.config import ConfigurationError, Settings, load_settings
from google_search_mcp.search import GoogleSearchClient, RateGate, SearchOrchestrator
from google_search_mcp.server import create_server, run_stdio

logger = logging.getLogger(__name__)


def build_orchestrator(settings: Settings) -> SearchOrchestrator:
    client = GoogleSearchClient(
        api_key=settings.google_api_key,
        engine_id=settings.google_search_engine_id,
        endpoint=settings.google_search_endpoint,
        timeout=settings.search_request_timeout,
    )
    rate_gate = RateGate(max_per_minute=settings.search_rate_limit_per_minute)
    return SearchOrchestrator(client=client, rate_gate=rate_gate)


def _configure_logging(level: str):
    # stdout carries the protocol
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        _configure_logging("INFO")
        logger.error("%s", e)
        return 1
    _configure_logging(settings.log_level)

    server = create_server(build_orchestrator(settings))
    try:
        anyio.run(run_stdio, server)
    except Exception:
        logger.exception("Fatal error running server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
