"""Search API clients: Google Custom Search."""

from .google import GoogleSearchClient, build_query_params, parse_response

__all__ = ["GoogleSearchClient", "build_query_params", "parse_response"]
