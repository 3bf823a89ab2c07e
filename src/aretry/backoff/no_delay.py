r"""Strategy resubmitting failed requests immediately."""

from __future__ import annotations

__all__ = ["NoDelay", "no_delay"]

from aretry.backoff.base import BaseDelayStrategy


class NoDelay(BaseDelayStrategy):
    """Delay strategy that never waits.

    Example:
        ```pycon
        >>> from aretry.backoff import NoDelay
        >>> NoDelay().calculate(3)
        0.0

        ```
    """

    def calculate(self, attempt_count: int = 0, error: BaseException | None = None) -> float:  # noqa: ARG002
        return 0.0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def no_delay(attempt_count: int = 0, error: BaseException | None = None) -> float:  # noqa: ARG001
    """Return a zero delay. Default ``retry_delay``."""
    return 0.0
