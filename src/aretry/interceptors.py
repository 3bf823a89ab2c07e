r"""Interceptor chains of the HTTP client.

Interceptors are pairs of handlers registered on a client. A request
interceptor receives the ``RequestConfig`` before it is dispatched. A
response interceptor receives the response of a successful attempt, or
the error of a failed one, and may recover from the error by returning
a response.
"""

from __future__ import annotations

__all__ = ["Interceptor", "InterceptorManager", "Interceptors", "run_chain"]

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


@dataclass(frozen=True)
class Interceptor:
    """A pair of handlers. Either handler can be ``None``."""

    fulfilled: Callable[[Any], Any] | None = None
    rejected: Callable[[Exception], Any] | None = None


class InterceptorManager:
    """Ordered registry of interceptors.

    Example:
        ```pycon
        >>> from aretry.interceptors import InterceptorManager
        >>> manager = InterceptorManager()
        >>> handler_id = manager.use(lambda config: config)
        >>> len(manager)
        1
        >>> manager.eject(handler_id)
        >>> len(manager)
        0

        ```
    """

    def __init__(self) -> None:
        self._handlers: dict[int, Interceptor] = {}
        self._next_id = 0

    def use(
        self,
        fulfilled: Callable[[Any], Any] | None = None,
        rejected: Callable[[Exception], Any] | None = None,
    ) -> int:
        """Register an interceptor.

        Args:
            fulfilled: Handler receiving the value of the chain.
            rejected: Handler receiving the error of the chain.

        Returns:
            An identifier that can be passed to ``eject``.
        """
        handler_id = self._next_id
        self._next_id += 1
        self._handlers[handler_id] = Interceptor(fulfilled=fulfilled, rejected=rejected)
        return handler_id

    def eject(self, handler_id: int) -> None:
        """Remove an interceptor. Unknown identifiers are ignored."""
        self._handlers.pop(handler_id, None)

    def clear(self) -> None:
        self._handlers.clear()

    def __iter__(self) -> Iterator[Interceptor]:
        return iter(list(self._handlers.values()))

    def __len__(self) -> int:
        return len(self._handlers)


class Interceptors:
    """Request and response interceptor registries of a client."""

    def __init__(self) -> None:
        self.request = InterceptorManager()
        self.response = InterceptorManager()


async def _invoke(handler: Callable[[Any], Any], arg: Any) -> Any:
    result = handler(arg)
    if inspect.isawaitable(result):
        result = await result
    return result


async def run_chain(
    handlers: Iterable[Interceptor], value: Any = None, error: Exception | None = None
) -> Any:
    """Run a value or an error through a chain of interceptors.

    While the chain holds a value, each ``fulfilled`` handler maps it to
    a new value. While it holds an error, each ``rejected`` handler can
    recover by returning a value. An exception raised by any handler
    puts the chain on the error track. Handlers can be synchronous or
    asynchronous.

    Args:
        handlers: The interceptors, in execution order.
        value: The initial value.
        error: The initial error. Takes precedence over ``value``.

    Returns:
        The final value.

    Raises:
        Exception: The final error, unchanged, if the chain ends on the
            error track.
    """
    for handler in handlers:
        try:
            if error is None:
                if handler.fulfilled is not None:
                    value = await _invoke(handler.fulfilled, value)
            elif handler.rejected is not None:
                value = await _invoke(handler.rejected, error)
                error = None
        except Exception as exc:  # noqa: BLE001
            error = exc
    if error is not None:
        raise error
    return value
