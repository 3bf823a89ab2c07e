r"""Retry options, effective policy, and their resolution.

Options can be given globally when attaching the retry interceptor and
per request on ``RequestConfig.retry_options``. Request options override
the global ones field by field, and fields neither of them sets fall
back to the documented defaults.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RetryOptions",
    "RetryPolicy",
    "resolve_effective_policy",
]

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from aretry.backoff.no_delay import no_delay
from aretry.conditions import is_network_or_idempotent_request_error
from aretry.core.validation import validate_callable, validate_retries

if TYPE_CHECKING:
    from aretry.backoff.base import RetryDelay
    from aretry.conditions import RetryCondition
    from aretry.core.request import RequestConfig


# Default maximum number of retries
# Total attempts = retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Default request timeout in milliseconds (0 means no timeout)
DEFAULT_TIMEOUT = 0


@dataclass
class RetryOptions:
    """Retry options, usable globally or per request.

    Every field is optional. ``None`` means the field is not specified
    and the value is taken from the next level (global options, then the
    documented default).

    Args:
        retries: Maximum number of retries. Must be >= 0. Defaults to 3.
        retry_condition: Predicate deciding whether an error is retryable.
            Defaults to ``is_network_or_idempotent_request_error``.
        retry_delay: Function mapping ``(attempt_count, error)`` to a
            delay in milliseconds. Defaults to ``no_delay``.
        should_reset_timeout: If ``True``, each retry keeps the original
            timeout instead of consuming a shared deadline. Defaults to
            ``False``.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryOptions
        >>> options = RetryOptions(retries=5)
        >>> merged = options.merge(RetryOptions(should_reset_timeout=True))
        >>> merged.retries, merged.should_reset_timeout
        (5, True)

        ```
    """

    retries: int | None = None
    retry_condition: RetryCondition | None = None
    retry_delay: RetryDelay | None = None
    should_reset_timeout: bool | None = None

    def __post_init__(self) -> None:
        validate_retries(self.retries)
        validate_callable("retry_condition", self.retry_condition)
        validate_callable("retry_delay", self.retry_delay)

    def merge(self, overrides: RetryOptions | None = None, **kwargs: Any) -> RetryOptions:
        """Create new options with the specified fields overridden.

        Only fields that are not ``None`` in ``overrides`` (or in
        ``kwargs``) replace the current values. The current instance is
        left unchanged.

        Args:
            overrides: Optional options whose set fields take precedence.
            **kwargs: Individual fields taking precedence over both.

        Returns:
            A new ``RetryOptions`` instance.
        """
        values = {} if overrides is None else overrides.to_dict()
        values.update(kwargs)
        filtered_overrides = {k: v for k, v in values.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class RetryPolicy:
    """Effective retry policy for one failed request.

    Attributes:
        max_retries: Maximum number of retries.
        retry_condition: Predicate deciding whether an error is retryable.
        retry_delay: Function computing the delay in milliseconds.
        reset_timeout_on_retry: Whether the timeout is kept as is on retry.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    retry_condition: RetryCondition = is_network_or_idempotent_request_error
    retry_delay: RetryDelay = no_delay
    reset_timeout_on_retry: bool = False


def resolve_effective_policy(
    config: RequestConfig, global_defaults: RetryOptions | None = None
) -> RetryPolicy:
    """Resolve the retry policy that applies to a request.

    Args:
        config: The request configuration, possibly carrying
            request-specific ``retry_options``.
        global_defaults: The options bound when the retry interceptor
            was attached.

    Returns:
        The effective policy for this request.

    Example:
        ```pycon
        >>> from aretry.core import RequestConfig, RetryOptions, resolve_effective_policy
        >>> config = RequestConfig(url="https://example.com", retry_options=RetryOptions(retries=0))
        >>> policy = resolve_effective_policy(config, RetryOptions(retries=5))
        >>> policy.max_retries
        0

        ```
    """
    base = global_defaults if global_defaults is not None else RetryOptions()
    options = base.merge(config.retry_options)
    policy = RetryPolicy()
    return replace(
        policy,
        max_retries=policy.max_retries if options.retries is None else options.retries,
        retry_condition=options.retry_condition or policy.retry_condition,
        retry_delay=options.retry_delay or policy.retry_delay,
        reset_timeout_on_retry=bool(options.should_reset_timeout),
    )
