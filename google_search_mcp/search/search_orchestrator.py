"""
Search orchestrator: validate arguments, pass the rate gate, query Google, render text.

Each step returns either its value or a SearchError; search() is the one place where
a terminal error becomes an error-flagged ToolResult.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from google_search_mcp.search.clients import GoogleSearchClient
from google_search_mcp.search.schemas import (
    SearchError,
    SearchErrorKind,
    SearchRequest,
    SearchResultSet,
    ToolResult,
)
from google_search_mcp.search.support import RateGate

logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No results found"


def _invalid(message: str) -> SearchError:
    return SearchError(kind=SearchErrorKind.INVALID_ARGUMENT, message=message)


def parse_search_arguments(arguments: Optional[Mapping[str, Any]]) -> SearchRequest | SearchError:
    """Typed parse of raw tool arguments into a SearchRequest."""
    if arguments is None or (isinstance(arguments, Mapping) and not arguments):
        return _invalid("No arguments provided")
    if not isinstance(arguments, Mapping) or not isinstance(arguments.get("query"), str):
        return _invalid("Invalid arguments for Google search")
    try:
        return SearchRequest.model_validate(dict(arguments))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "arguments"
        return _invalid(f"Invalid value for {field}: {first['msg']}")


def format_results(result_set: SearchResultSet) -> str:
    if result_set.is_empty:
        return NO_RESULTS_TEXT
    blocks = [
        f"Title: {item.title}\nURL: {item.url}\nDescription: {item.snippet}"
        for item in result_set.items
    ]
    return f"Found {len(blocks)} results:\n\n" + "\n\n".join(blocks)


class SearchOrchestrator:
    def __init__(self, client: GoogleSearchClient, rate_gate: RateGate):
        self.client = client
        self.rate_gate = rate_gate

    def _run(self, arguments: Optional[Mapping[str, Any]]) -> str | SearchError:
        request = parse_search_arguments(arguments)
        if isinstance(request, SearchError):
            return request

        decision = self.rate_gate.acquire()
        if not decision.granted:
            return SearchError(
                kind=SearchErrorKind.RATE_LIMITED,
                message=f"Rate limit exceeded, retry in {decision.retry_after:.0f}s",
            )

        result_set = self.client.search(request)
        if isinstance(result_set, SearchError):
            return result_set
        return format_results(result_set)

    def search(self, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        try:
            outcome = self._run(arguments)
        except Exception as e:
            logger.exception("Unexpected failure in google_search")
            outcome = SearchError(kind=SearchErrorKind.PROVIDER_ERROR, message=str(e) or type(e).__name__)

        if isinstance(outcome, SearchError):
            logger.warning("google_search failed (%s): %s", outcome.kind.value, outcome.message)
            return ToolResult.from_error(outcome)
        return ToolResult(text=outcome)
