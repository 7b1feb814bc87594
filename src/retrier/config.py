r"""Default values shared by the retry strategies and executors."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_BASE",
    "DEFAULT_MAX_WAIT_MILLIS",
    "DEFAULT_START_WAIT_MILLIS",
    "MAX_CAUSE_DEPTH",
    "RETRY_STATUS_CODES",
    "TOKEN_POLL_INTERVAL",
]

# Initial delay in milliseconds of the exponential wait strategy
DEFAULT_START_WAIT_MILLIS = 1

# Growth factor of the exponential wait strategy
# Wait time = start_millis * (base ** attempt)
DEFAULT_BACKOFF_BASE = 2.0

# Upper bound in milliseconds of a single pause between two attempts
DEFAULT_MAX_WAIT_MILLIS = 1000

# Maximum number of links followed when looking for a cancellation
# in the cause chain of an exception
MAX_CAUSE_DEPTH = 32

# Longest slice in seconds of an asyncio pause between two checks of
# the cancellation token
TOKEN_POLL_INTERVAL = 0.05

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
