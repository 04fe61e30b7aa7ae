"""
Rate limit tracking.

Packet advertises the remaining call quota on every response through three
headers. Parsing is best-effort: the data is advisory, so a missing or
malformed header leaves the corresponding field at its default and never
raises.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RESET = "X-RateLimit-Reset"


@dataclass
class RateSnapshot:
    """
    Server-advertised call quota from the most recent exchange.

    Attributes:
        limit: Total requests allowed in the current window
        remaining: Requests left in the current window
        reset: When the window resets (UTC), None if not advertised
    """

    limit: int = 0
    remaining: int = 0
    reset: Optional[datetime] = None

    @property
    def is_exhausted(self) -> bool:
        """True when the server advertised a limit and no calls remain."""
        return self.limit > 0 and self.remaining <= 0

    def seconds_until_reset(self, now: Optional[datetime] = None) -> Optional[float]:
        """
        Seconds until the quota window resets.

        Returns None when no reset time was advertised, 0.0 if it has passed.
        """
        if self.reset is None:
            return None
        now = now or datetime.now(timezone.utc)
        return max(0.0, (self.reset - now).total_seconds())


def _parse_int(value: Optional[str]) -> Optional[int]:
    # plain ASCII integers only: int() would also take "1_000", " 7 " or "١٢"
    if not value or not value.isascii() or not value.lstrip("+-").isdigit():
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_rate(headers: Mapping[str, str]) -> RateSnapshot:
    """
    Extract a RateSnapshot from response headers.

    Args:
        headers: Response headers (case-insensitive mapping from requests)

    Returns:
        New RateSnapshot; fields without a usable header keep their defaults

    Example:
        >>> snap = parse_rate({"X-RateLimit-Limit": "100", "X-RateLimit-Remaining": "99"})
        >>> (snap.limit, snap.remaining, snap.reset)
        (100, 99, None)
    """
    snapshot = RateSnapshot()

    limit = _parse_int(headers.get(HEADER_RATE_LIMIT))
    if limit is not None:
        snapshot.limit = limit

    remaining = _parse_int(headers.get(HEADER_RATE_REMAINING))
    if remaining is not None:
        snapshot.remaining = remaining

    # 0 means "not advertised", not the epoch
    reset = _parse_int(headers.get(HEADER_RATE_RESET))
    if reset:
        try:
            snapshot.reset = datetime.fromtimestamp(reset, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            pass

    return snapshot
