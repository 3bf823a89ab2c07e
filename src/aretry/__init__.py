r"""aretry - Retry policy layer for an interceptor-based async HTTP client.

This package augments an HTTP client built on httpx with automatic
re-issuance of failed requests. A pair of interceptor hooks classify
each failure with a pluggable predicate, track per-request retry state,
wait between attempts, shrink the remaining timeout budget and resubmit
the request, up to a maximum number of retries.

Key Features:
    - Retry of network errors and of idempotent requests failing with 5xx
    - Pluggable retry conditions and delay strategies
    - Exponential delay with jitter
    - Per-request option overrides
    - Timeout treated as a deadline shared by all the attempts
    - Classification predicates usable standalone

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import AsyncInterceptorClient, attach_retry_policy, exponential_delay
    >>> async def main():  # doctest: +SKIP
    ...     async with AsyncInterceptorClient() as client:
    ...         attach_retry_policy(client, retries=3, retry_delay=exponential_delay)
    ...         response = await client.get("https://api.example.com/data")
    ...         # Request-specific options
    ...         from aretry import RetryOptions
    ...         response = await client.get(
    ...             "https://api.example.com/data", retry_options=RetryOptions(retries=0)
    ...         )
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ABORT_CODE",
    "AsyncInterceptorClient",
    "ClientDefaults",
    "HttpRequestError",
    "RequestConfig",
    "RetryInterceptor",
    "RetryOptions",
    "__version__",
    "attach_retry_policy",
    "exponential_delay",
    "is_idempotent_request_error",
    "is_network_error",
    "is_network_or_idempotent_request_error",
    "is_retryable_error",
    "is_safe_request_error",
    "no_delay",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import exponential_delay, no_delay
from aretry.client import AsyncInterceptorClient
from aretry.conditions import (
    is_idempotent_request_error,
    is_network_error,
    is_network_or_idempotent_request_error,
    is_retryable_error,
    is_safe_request_error,
)
from aretry.core import ClientDefaults, RequestConfig, RetryOptions
from aretry.exceptions import ABORT_CODE, HttpRequestError
from aretry.retry import RetryInterceptor, attach_retry_policy

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
