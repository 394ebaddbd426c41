from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

DEFAULT_NUM_RESULTS = 10
MIN_NUM_RESULTS = 1
MAX_NUM_RESULTS = 10

SafeSearch = Literal["off", "medium", "high"]


class SearchRequest(BaseModel):
    """Validated arguments of one google_search call."""

    model_config = ConfigDict(extra="ignore")

    query: StrictStr
    num_results: int = DEFAULT_NUM_RESULTS
    date_restrict: Optional[StrictStr] = None
    language: Optional[StrictStr] = None
    country: Optional[StrictStr] = None
    safe_search: Optional[SafeSearch] = None

    @field_validator("num_results", mode="before")
    @classmethod
    def _clamp_num_results(cls, value):
        """Accept integral numbers only, clamped into the 1-10 range the API serves."""
        if value is None:
            return DEFAULT_NUM_RESULTS
        if isinstance(value, bool):
            raise ValueError("must be a number")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("must be a whole number")
            value = int(value)
        if not isinstance(value, int):
            raise ValueError("must be a number")
        return max(MIN_NUM_RESULTS, min(MAX_NUM_RESULTS, value))


class SearchResultItem(BaseModel):
    title: str = ""
    url: str = ""
    snippet: str = ""


class SearchResultSet(BaseModel):
    items: list[SearchResultItem] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items


class SearchErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    RATE_LIMITED = "rate_limited"
    PROVIDER_ERROR = "provider_error"


class SearchError(BaseModel):
    """Terminal failure of one search step, returned instead of raised."""

    kind: SearchErrorKind
    message: str


class ToolResult(BaseModel):
    """Text payload handed back across the tool boundary."""

    text: str = Field(..., min_length=1)
    is_error: bool = False

    @classmethod
    def from_error(cls, error: SearchError) -> "ToolResult":
        return cls(text=f"Error: {error.message}", is_error=True)
