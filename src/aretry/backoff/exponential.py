r"""Exponential delay strategy with jitter."""

from __future__ import annotations

__all__ = ["ExponentialDelay", "exponential_delay"]

import random

from aretry.backoff.base import BaseDelayStrategy


class ExponentialDelay(BaseDelayStrategy):
    """Exponential delay strategy with additive random jitter.

    Calculates delay as: base_delay * (2 ** attempt_count), plus a jitter
    drawn uniformly from [0, jitter_factor * delay). With the defaults
    the delay is in [100 * 2**n, 120 * 2**n) milliseconds.

    The jitter spreads the retries of clients that failed at the same
    time.

    Args:
        base_delay: The base delay in milliseconds (default: 100).
        jitter_factor: Maximum jitter as a fraction of the delay
            (default: 0.2).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialDelay
        >>> strategy = ExponentialDelay(base_delay=100.0, jitter_factor=0.0)
        >>> strategy.calculate(0)
        100.0
        >>> strategy.calculate(3)
        800.0

        ```
    """

    def __init__(self, base_delay: float = 100.0, jitter_factor: float = 0.2) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if jitter_factor < 0:
            msg = f"jitter_factor must be non-negative, got {jitter_factor}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.jitter_factor = jitter_factor

    def calculate(self, attempt_count: int = 0, error: BaseException | None = None) -> float:  # noqa: ARG002
        """Calculate the exponential delay for a retry.

        Args:
            attempt_count: The retry count. ``None`` or missing counts as 0.
            error: Unused.

        Returns:
            The delay in milliseconds, jitter included.
        """
        delay = float(2 ** (attempt_count or 0)) * self.base_delay
        jitter = delay * self.jitter_factor * random.random()  # noqa: S311
        return delay + jitter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_delay={self.base_delay}, "
            f"jitter_factor={self.jitter_factor})"
        )


_DEFAULT_EXPONENTIAL_DELAY = ExponentialDelay()


def exponential_delay(attempt_count: int = 0, error: BaseException | None = None) -> float:
    """Return ``2**attempt_count * 100`` milliseconds plus up to 20%
    jitter.

    Example:
        ```pycon
        >>> from aretry import exponential_delay
        >>> 100 <= exponential_delay() < 120
        True
        >>> 800 <= exponential_delay(3) < 960
        True

        ```
    """
    return _DEFAULT_EXPONENTIAL_DELAY.calculate(attempt_count, error)
