"""Google web search: validation, rate gating, retrieval and rendering."""

from .clients import GoogleSearchClient, build_query_params, parse_response
from .schemas import (
    SearchError,
    SearchErrorKind,
    SearchRequest,
    SearchResultItem,
    SearchResultSet,
    ToolResult,
)
from .search_orchestrator import SearchOrchestrator, format_results, parse_search_arguments
from .support import RateDecision, RateGate

__all__ = [
    "GoogleSearchClient",
    "build_query_params",
    "parse_response",
    "parse_search_arguments",
    "format_results",
    "SearchOrchestrator",
    "SearchRequest",
    "SearchResultItem",
    "SearchResultSet",
    "SearchError",
    "SearchErrorKind",
    "ToolResult",
    "RateGate",
    "RateDecision",
]
