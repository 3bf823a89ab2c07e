r"""Parameter validation utilities for the retry configuration.

This module provides validation functions for retry options and request
timeouts to ensure they meet the required constraints before being used
by the retry interceptor.
"""

from __future__ import annotations

__all__ = ["validate_callable", "validate_retries", "validate_timeout"]

from typing import Any


def validate_timeout(timeout: float | None) -> None:
    """Validate a request timeout expressed in milliseconds.

    Args:
        timeout: Timeout budget in milliseconds. ``None`` or ``0`` means
            no timeout.

    Raises:
        ValueError: If timeout is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_timeout
        >>> validate_timeout(1000)
        >>> validate_timeout(0)
        >>> validate_timeout(None)
        >>> validate_timeout(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be >= 0, got -1

        ```
    """
    if timeout is not None and timeout < 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ValueError(msg)


def validate_retries(retries: int | None) -> None:
    """Validate the maximum number of retries.

    Args:
        retries: Maximum number of retries. ``None`` means unspecified.
            A value of 0 means no retries (only the initial attempt).

    Raises:
        TypeError: If retries is not an integer.
        ValueError: If retries is negative.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_retries
        >>> validate_retries(3)
        >>> validate_retries(0)
        >>> validate_retries(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: retries must be >= 0, got -1

        ```
    """
    if retries is None:
        return
    if isinstance(retries, bool) or not isinstance(retries, int):
        msg = f"retries must be an integer, got {type(retries).__name__}"
        raise TypeError(msg)
    if retries < 0:
        msg = f"retries must be >= 0, got {retries}"
        raise ValueError(msg)


def validate_callable(name: str, value: Any) -> None:
    """Validate that an optional option value is callable.

    Args:
        name: The option name, used in the error message.
        value: The option value. ``None`` means unspecified.

    Raises:
        TypeError: If value is not ``None`` and not callable.
    """
    if value is not None and not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)
