r"""Request configuration handled by the interceptor client.

``RequestConfig`` describes one outgoing request and is the object the
interceptors receive and mutate. ``ClientDefaults`` holds the values a
client fills in for fields a request leaves unset.
"""

from __future__ import annotations

__all__ = ["ClientDefaults", "RequestConfig", "keep_data", "default_validate_status"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from aretry.core.config import DEFAULT_TIMEOUT
from aretry.core.validation import validate_timeout
from aretry.utils.transform import json_transform

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aretry.core.config import RetryOptions
    from aretry.core.state import RetryState
    from aretry.utils.transform import Transform


def default_validate_status(status_code: int) -> bool:
    """Accept only 2xx responses."""
    return 200 <= status_code < 300


def keep_data(data: Any, headers: dict[str, str]) -> Any:  # noqa: ARG001
    """Return the request body unchanged.

    Installed on retried requests because the body was already
    transformed by the previous attempt.
    """
    return data


@dataclass
class RequestConfig:
    """Configuration of one outgoing request.

    Args:
        url: The URL to send the request to.
        method: The HTTP method. Normalised to lowercase.
        params: Optional query parameters.
        headers: Request headers.
        data: Request body, transformed by ``transform_request`` before
            being sent.
        timeout: Timeout budget in milliseconds. ``None`` means the
            client default, ``0`` means no timeout.
        validate_status: Predicate accepting a response status code.
            Rejected statuses raise ``HttpRequestError``.
        transform_request: Pipeline applied to ``data`` before sending.
        transport: Transport used for any scheme.
        http_transport: Transport used for ``http`` URLs.
        https_transport: Transport used for ``https`` URLs.
        retry_options: Request-specific retry options.
        retry_state: Retry state, managed by the retry interceptor.
    """

    url: str = ""
    method: str = "get"
    params: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    data: Any = None
    timeout: float | None = None
    validate_status: Callable[[int], bool] | None = None
    transform_request: list[Transform] | None = None
    transport: httpx.AsyncBaseTransport | None = None
    http_transport: httpx.AsyncBaseTransport | None = None
    https_transport: httpx.AsyncBaseTransport | None = None
    retry_options: RetryOptions | None = None
    retry_state: RetryState | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.method = self.method.lower()
        validate_timeout(self.timeout)


@dataclass
class ClientDefaults:
    """Values a client uses for fields a request leaves unset.

    Args:
        headers: Headers sent with every request. Request headers win.
        timeout: Default timeout in milliseconds. ``0`` means no timeout.
        validate_status: Default status predicate (2xx).
        transform_request: Default body pipeline (JSON encoding).
        transport: Default transport for any scheme.
        http_transport: Default transport for ``http`` URLs.
        https_transport: Default transport for ``https`` URLs.
    """

    headers: dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    validate_status: Callable[[int], bool] = default_validate_status
    transform_request: list[Transform] = field(default_factory=lambda: [json_transform])
    transport: httpx.AsyncBaseTransport | None = None
    http_transport: httpx.AsyncBaseTransport | None = None
    https_transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        validate_timeout(self.timeout)

    def apply(self, config: RequestConfig) -> None:
        """Fill the unset fields of ``config`` in place."""
        config.headers = {**self.headers, **config.headers}
        if config.timeout is None:
            config.timeout = self.timeout
        if config.validate_status is None:
            config.validate_status = self.validate_status
        if config.transform_request is None:
            config.transform_request = list(self.transform_request)
        if config.transport is None:
            config.transport = self.transport
        if config.http_transport is None:
            config.http_transport = self.http_transport
        if config.https_transport is None:
            config.https_transport = self.https_transport
