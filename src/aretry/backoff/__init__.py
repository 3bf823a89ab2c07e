r"""Delay strategies computing the wait before a retry."""

from __future__ import annotations

__all__ = [
    "BaseDelayStrategy",
    "ExponentialDelay",
    "NoDelay",
    "RetryDelay",
    "exponential_delay",
    "no_delay",
]

from aretry.backoff.base import BaseDelayStrategy, RetryDelay
from aretry.backoff.exponential import ExponentialDelay, exponential_delay
from aretry.backoff.no_delay import NoDelay, no_delay
