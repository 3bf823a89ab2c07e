r"""Retry interceptor resubmitting failed requests.

This module provides the ``RetryInterceptor`` class and the
``attach_retry_policy`` function registering it on an
``AsyncInterceptorClient``. The request hook stamps each attempt and the
rejection hook decides whether to retry, waits, shrinks the remaining
timeout budget and resubmits the request through the client.
"""

from __future__ import annotations

__all__ = ["RetryInterceptor", "attach_retry_policy", "remaining_timeout", "should_retry"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.core.config import RetryOptions, resolve_effective_policy
from aretry.core.request import keep_data
from aretry.core.state import get_or_init_state

if TYPE_CHECKING:
    import httpx

    from aretry.client import AsyncInterceptorClient
    from aretry.core.config import RetryPolicy
    from aretry.core.request import RequestConfig
    from aretry.core.state import RetryState

logger: logging.Logger = logging.getLogger(__name__)

_TRANSPORT_FIELDS = ("transport", "http_transport", "https_transport")


def now_ms() -> float:
    """Return the monotonic clock in milliseconds."""
    return time.monotonic() * 1000


def should_retry(error: BaseException, policy: RetryPolicy, state: RetryState) -> bool:
    """Return whether a failed request is resubmitted.

    Args:
        error: The error of the failed attempt.
        policy: The effective retry policy of the request.
        state: The retry state of the request.

    Returns:
        ``True`` if the error satisfies the retry condition and the
        retry budget is not exhausted.
    """
    return bool(policy.retry_condition(error)) and state.attempt_count < policy.max_retries


def remaining_timeout(timeout: float, elapsed: float, delay: float) -> float:
    """Return the timeout left for the next attempt.

    The timeout is a deadline shared by all the attempts of a request.
    The result is floored at 1 ms because a timeout of 0 means no
    timeout.

    Args:
        timeout: The current timeout in milliseconds.
        elapsed: Time spent by the failed attempt in milliseconds.
        delay: Delay before the next attempt in milliseconds.

    Returns:
        The new timeout in milliseconds.

    Example:
        ```pycon
        >>> from aretry.retry import remaining_timeout
        >>> remaining_timeout(1000, 300, 200)
        500
        >>> remaining_timeout(1000, 900, 200)
        1

        ```
    """
    return max(timeout - elapsed - delay, 1)


class RetryInterceptor:
    r"""Pair of interceptor hooks implementing the retry policy.

    Args:
        client: The client the hooks resubmit requests through.
        options: Global retry options. Fields left unset fall back to
            the defaults (3 retries, network or idempotent errors, no
            delay, shared timeout).

    Attributes:
        request_interceptor_id: Identifier of the request hook, once
            attached.
        response_interceptor_id: Identifier of the rejection hook, once
            attached.
    """

    def __init__(self, client: AsyncInterceptorClient, options: RetryOptions | None = None) -> None:
        self.client = client
        self.options = options if options is not None else RetryOptions()
        self.request_interceptor_id: int | None = None
        self.response_interceptor_id: int | None = None

    def attach(self) -> RetryInterceptor:
        """Register both hooks on the client."""
        self.request_interceptor_id = self.client.interceptors.request.use(self.on_request)
        self.response_interceptor_id = self.client.interceptors.response.use(
            None, self.on_rejected
        )
        return self

    def detach(self) -> None:
        """Remove both hooks from the client."""
        if self.request_interceptor_id is not None:
            self.client.interceptors.request.eject(self.request_interceptor_id)
            self.request_interceptor_id = None
        if self.response_interceptor_id is not None:
            self.client.interceptors.response.eject(self.response_interceptor_id)
            self.response_interceptor_id = None

    def on_request(self, config: RequestConfig) -> RequestConfig:
        """Stamp the start time of a transport attempt."""
        state = get_or_init_state(config)
        state.last_request_timestamp = now_ms()
        return config

    async def on_rejected(self, error: Exception) -> httpx.Response:
        """Retry a failed request or re-raise its error.

        A resubmission that fails again comes back to this hook, so the
        number of attempts is bounded by the retry budget of the policy.

        Args:
            error: The error of the failed attempt.

        Returns:
            The response of a resubmitted attempt.

        Raises:
            Exception: The original error, unchanged, when the request
                is not retried.
        """
        config: RequestConfig | None = getattr(error, "config", None)
        if config is None:
            raise error

        policy = resolve_effective_policy(config, self.options)
        state = get_or_init_state(config)
        if not should_retry(error, policy, state):
            logger.debug(
                f"{config.method.upper()} request to {config.url} not retried after "
                f"{state.attempt_count} retries: {error}"
            )
            raise error

        state.attempt_count += 1
        delay = policy.retry_delay(state.attempt_count, error)
        self._strip_default_transports(config)

        if (
            not policy.reset_timeout_on_retry
            and config.timeout
            and state.last_request_timestamp is not None
        ):
            elapsed = now_ms() - state.last_request_timestamp
            config.timeout = remaining_timeout(config.timeout, elapsed, delay)
            logger.debug(f"Remaining timeout for {config.url}: {config.timeout:.0f}ms")

        config.transform_request = [keep_data]

        logger.debug(
            f"{config.method.upper()} request to {config.url} failed ({error}), "
            f"retry {state.attempt_count}/{policy.max_retries} in {delay:.0f}ms"
        )
        await asyncio.sleep(delay / 1000)
        return await self.client.request(config)

    def _strip_default_transports(self, config: RequestConfig) -> None:
        for name in _TRANSPORT_FIELDS:
            value = getattr(config, name)
            if value is not None and value is getattr(self.client.defaults, name):
                setattr(config, name, None)


def attach_retry_policy(
    client: AsyncInterceptorClient, options: RetryOptions | None = None, **kwargs: Any
) -> RetryInterceptor:
    r"""Add automatic retries to a client.

    Args:
        client: The client to augment.
        options: Global retry options.
        **kwargs: Individual ``RetryOptions`` fields, taking precedence
            over ``options``.

    Returns:
        The attached ``RetryInterceptor``. Call ``detach()`` on it to
        remove the retry behavior.

    Example:
        ```pycon
        >>> from aretry import AsyncInterceptorClient, attach_retry_policy, exponential_delay
        >>> client = AsyncInterceptorClient()
        >>> interceptor = attach_retry_policy(client, retries=5, retry_delay=exponential_delay)
        >>> interceptor.options.retries
        5

        ```
    """
    base = options if options is not None else RetryOptions()
    return RetryInterceptor(client, base.merge(RetryOptions(**kwargs))).attach()
