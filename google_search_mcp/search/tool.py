"""MCP declaration of the google_search tool."""

from mcp import types

from google_search_mcp.search.schemas import DEFAULT_NUM_RESULTS, MAX_NUM_RESULTS, MIN_NUM_RESULTS

TOOL_NAME = "google_search"

GOOGLE_SEARCH_TOOL = types.Tool(
    name=TOOL_NAME,
    description=(
        "Search Google and return relevant results from the web. This tool finds web pages, "
        "articles, and information on specific topics using Google's search engine. Results "
        "include titles, snippets, and URLs that can be analyzed further."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": (
                    "The search term or phrase to look up. For precise results: use quotes for exact "
                    "phrases, include relevant keywords, and keep queries concise (under 10 words ideal). "
                    "Example: 'best Italian restaurants in Boston' or 'how to fix leaking faucet'."
                ),
            },
            "num_results": {
                "type": "number",
                "description": (
                    f"Controls the number of search results returned (range: {MIN_NUM_RESULTS}-{MAX_NUM_RESULTS}, "
                    f"values outside are clamped). Default: {DEFAULT_NUM_RESULTS}."
                ),
                "minimum": MIN_NUM_RESULTS,
                "maximum": MAX_NUM_RESULTS,
                "default": DEFAULT_NUM_RESULTS,
            },
            "date_restrict": {
                "type": "string",
                "description": (
                    'Filters results by recency. Format: [d|w|m|y] + number. Examples: "d1" (last 24 hours), '
                    '"w1" (last week), "m6" (last 6 months), "y1" (last year).'
                ),
            },
            "language": {
                "type": "string",
                "description": (
                    'Limits results to a specific language. Provide 2-letter ISO code, e.g. "en", "es", '
                    '"fr", "de", "ja", "zh".'
                ),
            },
            "country": {
                "type": "string",
                "description": (
                    'Narrows results to a specific country. Provide 2-letter country code, e.g. "us", '
                    '"gb", "ca", "in", "au".'
                ),
            },
            "safe_search": {
                "type": "string",
                "enum": ["off", "medium", "high"],
                "description": (
                    'Content safety filter level. "off" = no filtering, "medium" = blocks explicit '
                    'images/videos, "high" = strict filtering for all content.'
                ),
            },
        },
        "required": ["query"],
    },
)
