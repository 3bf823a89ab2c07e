r"""Core data model of the retry layer.

This package contains the request configuration, the retry options and
policy resolution, the per-request retry state, and validation helpers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "ClientDefaults",
    "RequestConfig",
    "RetryOptions",
    "RetryPolicy",
    "RetryState",
    "get_or_init_state",
    "keep_data",
    "resolve_effective_policy",
    "validate_callable",
    "validate_retries",
    "validate_timeout",
]

from aretry.core.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RetryOptions,
    RetryPolicy,
    resolve_effective_policy,
)
from aretry.core.request import ClientDefaults, RequestConfig, keep_data
from aretry.core.state import RetryState, get_or_init_state
from aretry.core.validation import validate_callable, validate_retries, validate_timeout
