"""
Search support: the token bucket that gates outbound Google searches.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_PER_MINUTE = 10


@dataclass(frozen=True)
class RateDecision:
    granted: bool
    remaining: int
    retry_after: float = 0.0


class RateGate:
    """Token bucket refilled continuously at max_per_minute tokens per 60 seconds.

    acquire() never blocks: it either takes a token or reports how long until one
    is available. Token accounting is serialized so concurrent callers cannot
    share a token.
    """

    def __init__(
        self,
        max_per_minute: int = DEFAULT_MAX_PER_MINUTE,
        clock: Optional[Callable[[], float]] = None,
    ):
        if max_per_minute < 1:
            raise ValueError("max_per_minute must be at least 1")
        self.max_per_minute = max_per_minute
        self._clock = clock or time.monotonic
        self._refill_per_second = max_per_minute / 60.0
        self._tokens = float(max_per_minute)
        self._last_refill = self._clock()
        self._lock = Lock()

    def _refill(self, now: float):
        elapsed = now - self._last_refill
        if elapsed > 0:
            self._tokens = min(float(self.max_per_minute), self._tokens + elapsed * self._refill_per_second)
        self._last_refill = now

    def acquire(self) -> RateDecision:
        with self._lock:
            self._refill(self._clock())
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                remaining = int(self._tokens)
                logger.debug("Rate gate granted, %d tokens left", remaining)
                return RateDecision(granted=True, remaining=remaining)
            retry_after = (1.0 - self._tokens) / self._refill_per_second
        logger.warning("Rate gate denied, next token in %.1fs", retry_after)
        return RateDecision(granted=False, remaining=0, retry_after=retry_after)

    @property
    def available(self) -> int:
        with self._lock:
            self._refill(self._clock())
            return int(self._tokens)
