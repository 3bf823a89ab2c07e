r"""Asynchronous HTTP client with request and response interceptors.

This module provides ``AsyncInterceptorClient``, a thin layer over
``httpx.AsyncClient`` that describes every request with a mutable
``RequestConfig`` and runs it through interceptor chains. Failures are
raised as ``HttpRequestError`` carrying the config that produced them,
so a response interceptor can resubmit the same request.
"""

from __future__ import annotations

__all__ = ["AsyncInterceptorClient"]

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

import httpx

from aretry.core.request import ClientDefaults, RequestConfig
from aretry.exceptions import ABORT_CODE, HttpRequestError
from aretry.interceptors import Interceptors, run_chain
from aretry.utils.error_codes import error_code_from_exception
from aretry.utils.transform import apply_transforms

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)


class AsyncInterceptorClient:
    r"""Asynchronous HTTP client driven by ``RequestConfig`` objects.

    Request interceptors run before each dispatch, the most recently
    registered first. Response interceptors run after each dispatch, in
    registration order. Calling ``request`` again with a config taken
    from an error resubmits that request through both chains.

    Args:
        defaults: Values used for fields a request leaves unset.
        **kwargs: Additional keyword arguments passed to
            ``httpx.AsyncClient`` (e.g. ``base_url``).

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncInterceptorClient, attach_retry_policy
        >>> async def main():  # doctest: +SKIP
        ...     async with AsyncInterceptorClient() as client:
        ...         attach_retry_policy(client, retries=3)
        ...         response = await client.get("https://api.example.com/data")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, *, defaults: ClientDefaults | None = None, **kwargs: Any) -> None:
        self.defaults = defaults if defaults is not None else ClientDefaults()
        self.interceptors = Interceptors()
        self._client = httpx.AsyncClient(**kwargs)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __call__(self, config: RequestConfig) -> httpx.Response:
        return await self.request(config)

    async def request(self, config: RequestConfig) -> httpx.Response:
        """Send a request through the interceptor chains.

        The given config is copied before the defaults are applied, so
        a template config can be reused for several requests. The copy
        keeps the same ``retry_state`` object.

        Args:
            config: The request configuration.

        Returns:
            The response, possibly produced by a response interceptor.

        Raises:
            HttpRequestError: If the request fails and no response
                interceptor recovers from the failure.
        """
        config = replace(config, headers=dict(config.headers))
        self.defaults.apply(config)

        error: Exception | None = None
        response: httpx.Response | None = None
        try:
            config = await run_chain(reversed(list(self.interceptors.request)), config)
        except Exception as exc:  # noqa: BLE001
            error = exc
        if error is None:
            try:
                response = await self._dispatch(config)
            except HttpRequestError as exc:
                error = exc
        return await run_chain(self.interceptors.response, response, error)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="get", **kwargs))

    async def head(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="head", **kwargs))

    async def options(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="options", **kwargs))

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="delete", **kwargs))

    async def post(self, url: str, data: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="post", data=data, **kwargs))

    async def put(self, url: str, data: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="put", data=data, **kwargs))

    async def patch(self, url: str, data: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.request(RequestConfig(url=url, method="patch", data=data, **kwargs))

    def _select_transport(self, config: RequestConfig, scheme: str) -> httpx.AsyncBaseTransport | None:
        if scheme == "https" and config.https_transport is not None:
            return config.https_transport
        if scheme == "http" and config.http_transport is not None:
            return config.http_transport
        return config.transport

    async def _send(
        self, request: httpx.Request, transport: httpx.AsyncBaseTransport | None
    ) -> httpx.Response:
        if transport is None:
            return await self._client.send(request)
        response = await transport.handle_async_request(request)
        response.request = request
        try:
            await response.aread()
        finally:
            await response.aclose()
        return response

    async def _dispatch(self, config: RequestConfig) -> httpx.Response:
        """Send a single transport attempt.

        Raises:
            HttpRequestError: If a request transform fails, the attempt
                times out, the transport fails, the response cannot be
                read, or the response status is rejected.
        """
        try:
            config.data = apply_transforms(
                config.data, config.headers, config.transform_request or []
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"Request transform for {config.url} failed: {exc!r}")
            raise HttpRequestError(
                f"Request transform failed: {exc}",
                code="ERR_BAD_REQUEST",
                config=config,
                cause=exc,
            ) from exc
        timeout = config.timeout / 1000 if config.timeout else None
        try:
            request = self._client.build_request(
                config.method.upper(),
                config.url,
                params=config.params,
                headers=config.headers,
                content=config.data,
                timeout=timeout,
            )
        except httpx.InvalidURL as exc:
            raise HttpRequestError(
                f"Invalid URL {config.url!r}: {exc}",
                code="ERR_INVALID_URL",
                config=config,
                cause=exc,
            ) from exc

        transport = self._select_transport(config, request.url.scheme)
        try:
            response = await asyncio.wait_for(self._send(request, transport), timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.debug(f"{config.method.upper()} request to {config.url} timed out")
            raise HttpRequestError(
                f"timeout of {config.timeout}ms exceeded",
                code=ABORT_CODE,
                config=config,
                request=request,
                cause=exc,
            ) from exc
        except httpx.TransportError as exc:
            code = error_code_from_exception(exc)
            logger.debug(
                f"{config.method.upper()} request to {config.url} failed with "
                f"{type(exc).__name__} ({code}): {exc}"
            )
            raise HttpRequestError(
                str(exc) or type(exc).__name__,
                code=code,
                config=config,
                request=request,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            logger.debug(
                f"{config.method.upper()} request to {config.url} returned an unreadable "
                f"response: {type(exc).__name__}: {exc}"
            )
            raise HttpRequestError(
                str(exc) or type(exc).__name__,
                code="ERR_BAD_RESPONSE",
                config=config,
                request=request,
                cause=exc,
            ) from exc

        validate_status = config.validate_status or self.defaults.validate_status
        if not validate_status(response.status_code):
            logger.debug(
                f"{config.method.upper()} request to {config.url} failed with status "
                f"{response.status_code}"
            )
            raise HttpRequestError(
                f"Request failed with status code {response.status_code}",
                config=config,
                request=request,
                response=response,
            )
        return response
