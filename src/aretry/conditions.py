r"""Predicates classifying failed requests.

These functions decide whether an error is worth retrying. They are
stateless and can be used standalone, for example to compose a custom
``retry_condition``. Each predicate accepts any exception and reads its
``response``, ``code`` and ``config`` attributes, treating a missing
attribute as absent.
"""

from __future__ import annotations

__all__ = [
    "IDEMPOTENT_HTTP_METHODS",
    "SAFE_HTTP_METHODS",
    "RetryCondition",
    "is_idempotent_request_error",
    "is_network_error",
    "is_network_or_idempotent_request_error",
    "is_retryable_error",
    "is_safe_request_error",
]

from collections.abc import Callable

from aretry.exceptions import ABORT_CODE
from aretry.utils.retry_allowed import is_retry_allowed

RetryCondition = Callable[[BaseException], bool]

# Methods without side effects
SAFE_HTTP_METHODS = ("get", "head", "options")

# Methods that can be repeated and lead to the same end state
IDEMPOTENT_HTTP_METHODS = (*SAFE_HTTP_METHODS, "put", "delete")


def is_network_error(error: BaseException) -> bool:
    """Return whether the error is a retryable network error.

    A network error has no response, carries a non-empty code that is
    not the abort code (used for timeouts and cancellations), and the
    code is not known to indicate an unsafe failure such as a
    certificate error.

    Args:
        error: The error to classify.

    Returns:
        ``True`` if the error is a retryable network error.

    Example:
        ```pycon
        >>> from aretry import HttpRequestError, is_network_error
        >>> is_network_error(HttpRequestError("reset", code="ECONNRESET"))
        True
        >>> is_network_error(HttpRequestError("timeout", code="ECONNABORTED"))
        False

        ```
    """
    code = getattr(error, "code", None)
    return (
        getattr(error, "response", None) is None
        and bool(code)
        and code != ABORT_CODE
        and is_retry_allowed(error)
    )


def is_retryable_error(error: BaseException) -> bool:
    """Return whether the error may be transient.

    Aborted requests are never retryable. An error without a response
    (e.g. connection refused) or with a 5xx response is retryable, while
    4xx responses are not.

    Args:
        error: The error to classify.

    Returns:
        ``True`` if retrying the request could succeed.
    """
    if getattr(error, "code", None) == ABORT_CODE:
        return False
    response = getattr(error, "response", None)
    return response is None or 500 <= response.status_code <= 599


def _request_method(error: BaseException) -> str | None:
    config = getattr(error, "config", None)
    if config is None:
        return None
    method = getattr(config, "method", None)
    return method.lower() if isinstance(method, str) else None


def is_safe_request_error(error: BaseException) -> bool:
    """Return whether the error is retryable and the method is safe.

    Safe methods are ``get``, ``head`` and ``options``. Errors without a
    request configuration are never safe because the method is unknown.
    """
    if getattr(error, "config", None) is None:
        return False
    return is_retryable_error(error) and _request_method(error) in SAFE_HTTP_METHODS


def is_idempotent_request_error(error: BaseException) -> bool:
    """Return whether the error is retryable and the method is
    idempotent.

    Idempotent methods are the safe methods plus ``put`` and ``delete``.
    Errors without a request configuration are never idempotent.

    Example:
        ```pycon
        >>> from aretry import HttpRequestError, RequestConfig, is_idempotent_request_error
        >>> error = HttpRequestError("reset", code="ECONNRESET", config=RequestConfig(method="PUT"))
        >>> is_idempotent_request_error(error)
        True
        >>> is_idempotent_request_error(HttpRequestError("reset", code="ECONNRESET"))
        False

        ```
    """
    if getattr(error, "config", None) is None:
        return False
    return is_retryable_error(error) and _request_method(error) in IDEMPOTENT_HTTP_METHODS


def is_network_or_idempotent_request_error(error: BaseException) -> bool:
    """Default retry condition.

    Retries network errors for any method, including errors without a
    request configuration, and retryable errors of idempotent requests.
    """
    return is_network_error(error) or is_idempotent_request_error(error)
