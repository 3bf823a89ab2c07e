r"""Retry interceptor for ``AsyncInterceptorClient``."""

from __future__ import annotations

__all__ = ["RetryInterceptor", "attach_retry_policy", "remaining_timeout", "should_retry"]

from aretry.retry.interceptor import (
    RetryInterceptor,
    attach_retry_policy,
    remaining_timeout,
    should_retry,
)
