r"""Exception raised by the interceptor client when a request fails.

A single exception type is used for every failure surfaced to the
interceptor chain. The retry layer only inspects these errors and never
creates new ones, so callers always observe the error a non-retrying
client would have produced.
"""

from __future__ import annotations

__all__ = ["ABORT_CODE", "HttpRequestError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from aretry.core.request import RequestConfig

# Code attached to errors raised for timed out or aborted requests.
# Both cases must never be classified as retryable network errors.
ABORT_CODE = "ECONNABORTED"


class HttpRequestError(Exception):
    """Exception raised when an HTTP request attempt fails.

    Args:
        message: Human-readable description of the failure.
        code: Optional symbolic low-level failure code (e.g. ``"ECONNRESET"``
            or ``ABORT_CODE``). ``None`` when the server answered.
        config: The request configuration that produced this error.
        request: The httpx request that was sent, if it was built.
        response: The server response, present only if a server replied.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from aretry.exceptions import HttpRequestError
        >>> error = HttpRequestError("connection reset", code="ECONNRESET")
        >>> error.code
        'ECONNRESET'
        >>> error.status_code is None
        True

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        config: RequestConfig | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.config = config
        self.request = request
        self.response = response
        self.cause = cause

    @property
    def status_code(self) -> int | None:
        """The HTTP status code of the response, if a server replied."""
        if self.response is None:
            return None
        return self.response.status_code

    @property
    def method(self) -> str | None:
        if self.config is None:
            return None
        return self.config.method

    @property
    def url(self) -> str | None:
        if self.config is None:
            return None
        return self.config.url

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, "
            f"status_code={self.status_code!r})"
        )
