r"""Shared test helpers.

This module contains a scripted transport handler and factories for
errors and responses used across the test files.
"""

from __future__ import annotations

__all__ = ["TEST_URL", "SequenceHandler", "create_error", "create_response"]

from typing import Any

import httpx

from aretry import HttpRequestError, RequestConfig

TEST_URL = "https://api.example.com/data"


def create_response(status_code: int = 200, **kwargs: Any) -> httpx.Response:
    """Create an httpx response attached to a dummy request."""
    return httpx.Response(status_code, request=httpx.Request("GET", TEST_URL), **kwargs)


def create_error(
    code: str | None = None,
    status_code: int | None = None,
    method: str | None = "get",
) -> HttpRequestError:
    """Create an ``HttpRequestError``.

    Args:
        code: The error code.
        status_code: If set, the error carries a response with this status.
        method: The request method. ``None`` creates an error without
            config.
    """
    return HttpRequestError(
        "request failed",
        code=code,
        config=None if method is None else RequestConfig(url=TEST_URL, method=method),
        response=None if status_code is None else create_response(status_code),
    )


class SequenceHandler:
    """Transport handler returning scripted outcomes in order.

    An outcome is an exception (raised), an ``int`` (empty response
    with this status) or an ``httpx.Response``. Once the script is
    exhausted, the last outcome is repeated.
    """

    def __init__(self, *outcomes: Exception | int | httpx.Response) -> None:
        self.outcomes: list[Exception | int | httpx.Response] = list(outcomes)
        self.requests: list[httpx.Request] = []

    def push(self, *outcomes: Exception | int | httpx.Response) -> SequenceHandler:
        self.outcomes.extend(outcomes)
        return self

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index] if self.outcomes else 200
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, request=request)
        return outcome
