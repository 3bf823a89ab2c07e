r"""Unit tests for retry options and policy resolution."""

from __future__ import annotations

import pytest
from coola.equality import objects_are_equal

from aretry import RequestConfig, RetryOptions, exponential_delay, is_safe_request_error, no_delay
from aretry.conditions import is_network_or_idempotent_request_error
from aretry.core import DEFAULT_MAX_RETRIES, RetryPolicy, resolve_effective_policy

##################################
#     Tests for RetryOptions     #
##################################


def test_retry_options_defaults() -> None:
    options = RetryOptions()
    assert options.retries is None
    assert options.retry_condition is None
    assert options.retry_delay is None
    assert options.should_reset_timeout is None


@pytest.mark.parametrize("retries", [0, 1, 10])
def test_retry_options_retries(retries: int) -> None:
    assert RetryOptions(retries=retries).retries == retries


def test_retry_options_negative_retries() -> None:
    with pytest.raises(ValueError, match=r"retries must be >= 0, got -1"):
        RetryOptions(retries=-1)


def test_retry_options_invalid_retries_type() -> None:
    with pytest.raises(TypeError, match=r"retries must be an integer"):
        RetryOptions(retries=1.5)  # type: ignore[arg-type]


def test_retry_options_invalid_retry_condition() -> None:
    with pytest.raises(TypeError, match=r"retry_condition must be callable"):
        RetryOptions(retry_condition=True)  # type: ignore[arg-type]


def test_retry_options_invalid_retry_delay() -> None:
    with pytest.raises(TypeError, match=r"retry_delay must be callable"):
        RetryOptions(retry_delay=100)  # type: ignore[arg-type]


def test_retry_options_merge() -> None:
    options = RetryOptions(retries=5, retry_delay=exponential_delay)
    merged = options.merge(RetryOptions(retries=1, should_reset_timeout=True))
    assert objects_are_equal(
        merged.to_dict(),
        {
            "retries": 1,
            "retry_condition": None,
            "retry_delay": exponential_delay,
            "should_reset_timeout": True,
        },
    )


def test_retry_options_merge_keeps_original() -> None:
    options = RetryOptions(retries=5)
    options.merge(RetryOptions(retries=1))
    assert options.retries == 5


def test_retry_options_merge_none() -> None:
    options = RetryOptions(retries=5)
    assert options.merge(None) == options


def test_retry_options_merge_kwargs() -> None:
    merged = RetryOptions(retries=5).merge(RetryOptions(retries=1), retries=2, retry_delay=None)
    assert merged.retries == 2
    assert merged.retry_delay is None


def test_retry_options_merge_zero_retries() -> None:
    assert RetryOptions(retries=5).merge(RetryOptions(retries=0)).retries == 0


def test_retry_options_merge_false_should_reset_timeout() -> None:
    options = RetryOptions(should_reset_timeout=True)
    assert options.merge(RetryOptions(should_reset_timeout=False)).should_reset_timeout is False


##############################################
#     Tests for resolve_effective_policy     #
##############################################


def test_resolve_effective_policy_defaults() -> None:
    policy = resolve_effective_policy(RequestConfig(url="https://example.com"))
    assert policy == RetryPolicy(
        max_retries=DEFAULT_MAX_RETRIES,
        retry_condition=is_network_or_idempotent_request_error,
        retry_delay=no_delay,
        reset_timeout_on_retry=False,
    )


def test_resolve_effective_policy_global_defaults() -> None:
    policy = resolve_effective_policy(
        RequestConfig(url="https://example.com"),
        RetryOptions(retries=5, retry_delay=exponential_delay, should_reset_timeout=True),
    )
    assert policy.max_retries == 5
    assert policy.retry_condition is is_network_or_idempotent_request_error
    assert policy.retry_delay is exponential_delay
    assert policy.reset_timeout_on_retry


def test_resolve_effective_policy_request_overrides_per_field() -> None:
    config = RequestConfig(
        url="https://example.com", retry_options=RetryOptions(retries=0)
    )
    policy = resolve_effective_policy(
        config, RetryOptions(retries=5, retry_condition=is_safe_request_error)
    )
    assert policy.max_retries == 0
    assert policy.retry_condition is is_safe_request_error
    assert policy.retry_delay is no_delay


def test_resolve_effective_policy_request_only() -> None:
    config = RequestConfig(
        url="https://example.com",
        retry_options=RetryOptions(retry_delay=exponential_delay, should_reset_timeout=True),
    )
    policy = resolve_effective_policy(config, None)
    assert policy.max_retries == DEFAULT_MAX_RETRIES
    assert policy.retry_delay is exponential_delay
    assert policy.reset_timeout_on_retry


def test_resolve_effective_policy_does_not_mutate_defaults() -> None:
    defaults = RetryOptions(retries=5)
    config = RequestConfig(url="https://example.com", retry_options=RetryOptions(retries=1))
    resolve_effective_policy(config, defaults)
    assert defaults.retries == 5
