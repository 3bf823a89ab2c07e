r"""Abstract base class for delay strategies."""

from __future__ import annotations

__all__ = ["BaseDelayStrategy", "RetryDelay"]

from abc import ABC, abstractmethod
from collections.abc import Callable

RetryDelay = Callable[[int, BaseException], float]


class BaseDelayStrategy(ABC):
    """Abstract base class for delay strategies.

    A delay strategy determines how long to wait before resubmitting a
    failed request based on the retry count. Instances are callable with
    the ``retry_delay`` signature ``(attempt_count, error) -> milliseconds``
    so they can be passed directly as the ``retry_delay`` option.
    """

    def __call__(self, attempt_count: int = 0, error: BaseException | None = None) -> float:
        return self.calculate(attempt_count, error)

    @abstractmethod
    def calculate(self, attempt_count: int = 0, error: BaseException | None = None) -> float:
        """Calculate the delay before the next attempt.

        Args:
            attempt_count: The retry count, already incremented for the
                retry being scheduled. The first retry is 1.
            error: The error that triggered the retry.

        Returns:
            The delay in milliseconds.
        """
