"""
Google Custom Search JSON API client. Reuses a single requests.Session for performance.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote_plus

import requests

from google_search_mcp.config import GOOGLE_SEARCH_ENDPOINT
from google_search_mcp.search.schemas import (
    SearchError,
    SearchErrorKind,
    SearchRequest,
    SearchResultItem,
    SearchResultSet,
)

logger = logging.getLogger(__name__)


def build_query_params(request: SearchRequest, api_key: str, engine_id: str) -> dict[str, str]:
    """Map a SearchRequest onto Custom Search query parameters, skipping empty optionals."""
    params = {
        "key": api_key,
        "cx": engine_id,
        "q": request.query,
        "num": str(request.num_results),
    }
    optional = [
        ("dateRestrict", request.date_restrict),
        ("lr", request.language and f"lang_{request.language}"),
        ("gl", request.country),
        ("safe", request.safe_search),
    ]
    for key, value in optional:
        if value:
            params[key] = value
    return params


def _provider_error(message: str) -> SearchError:
    return SearchError(kind=SearchErrorKind.PROVIDER_ERROR, message=message)


def parse_response(data: Any) -> SearchResultSet | SearchError:
    """Turn a Custom Search response body into a SearchResultSet, keeping provider order."""
    if not isinstance(data, dict):
        return _provider_error("Malformed response from Google Search API")
    raw_items = data.get("items") or []
    if not isinstance(raw_items, list):
        return _provider_error("Malformed response from Google Search API: items is not a list")

    items = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            return _provider_error("Malformed response from Google Search API: item is not an object")
        items.append(
            SearchResultItem(
                title=str(raw.get("title") or ""),
                url=str(raw.get("link") or ""),
                snippet=str(raw.get("snippet") or ""),
            )
        )
    return SearchResultSet(items=items)


class GoogleSearchClient:
    def __init__(
        self,
        api_key: str,
        engine_id: str,
        endpoint: str = GOOGLE_SEARCH_ENDPOINT,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.engine_id = engine_id
        self.endpoint = endpoint
        self.timeout = timeout
        self._session = session

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _redact(self, text: str) -> str:
        if not self.api_key:
            return text
        for secret in {self.api_key, quote_plus(self.api_key)}:
            text = text.replace(secret, "***")
        return text

    def search(self, request: SearchRequest) -> SearchResultSet | SearchError:
        params = build_query_params(request, self.api_key, self.engine_id)
        try:
            response = self._get_session().get(
                self.endpoint,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # urllib3 puts the full request URL, key included, into connection errors
            message = self._redact(str(e)) or type(e).__name__
            logger.error("Google search request failed for query '%s': %s", request.query, message)
            return _provider_error(f"Google Search API request failed: {message}")

        if not response.ok:
            logger.error("Google search error for query '%s': HTTP %s", request.query, response.status_code)
            reason = response.reason or f"HTTP {response.status_code}"
            return _provider_error(f"Google Search API error: {reason}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Google search returned invalid JSON for query '%s': %s", request.query, e)
            return _provider_error(f"Invalid JSON response from Google Search API: {e}")

        return parse_response(data)
