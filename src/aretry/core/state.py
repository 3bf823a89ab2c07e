r"""Per-request retry state.

The state of a logical request lives on its ``RequestConfig``. The same
``RetryState`` object follows every resubmission of that request and is
never shared with another request.
"""

from __future__ import annotations

__all__ = ["RetryState", "get_or_init_state"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.core.request import RequestConfig


@dataclass
class RetryState:
    """Mutable retry state of one logical request.

    Attributes:
        attempt_count: Number of retries decided so far. The initial
            attempt is count 0.
        last_request_timestamp: Monotonic time in milliseconds of the
            latest transport attempt, or ``None`` before the first one.
    """

    attempt_count: int = 0
    last_request_timestamp: float | None = None


def get_or_init_state(config: RequestConfig) -> RetryState:
    """Return the retry state of a request, creating it if needed.

    An existing state is returned unchanged, so its counter is never
    reset.

    Args:
        config: The request configuration owning the state.

    Returns:
        The retry state attached to ``config``.

    Example:
        ```pycon
        >>> from aretry.core import RequestConfig, get_or_init_state
        >>> config = RequestConfig(url="https://example.com")
        >>> state = get_or_init_state(config)
        >>> state.attempt_count
        0
        >>> get_or_init_state(config) is state
        True

        ```
    """
    if config.retry_state is None:
        config.retry_state = RetryState()
    return config.retry_state
