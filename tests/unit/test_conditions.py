r"""Unit tests for the retry conditions."""

from __future__ import annotations

import pytest

from aretry import (
    ABORT_CODE,
    is_idempotent_request_error,
    is_network_error,
    is_network_or_idempotent_request_error,
    is_retryable_error,
    is_safe_request_error,
)
from aretry.conditions import IDEMPOTENT_HTTP_METHODS, SAFE_HTTP_METHODS
from tests.helpers import create_error

######################################
#     Tests for is_network_error     #
######################################


@pytest.mark.parametrize("code", ["ECONNRESET", "ECONNREFUSED", "ETIMEDOUT", "EPIPE", "EAI_AGAIN"])
def test_is_network_error_true(code: str) -> None:
    assert is_network_error(create_error(code=code))


@pytest.mark.parametrize("code", ["ECONNRESET", "ECONNREFUSED"])
def test_is_network_error_without_config(code: str) -> None:
    assert is_network_error(create_error(code=code, method=None))


@pytest.mark.parametrize("code", [None, ""])
def test_is_network_error_without_code(code: str | None) -> None:
    assert not is_network_error(create_error(code=code))


@pytest.mark.parametrize("status_code", [None, 503])
@pytest.mark.parametrize("method", ["get", "post", None])
def test_is_network_error_abort_code(status_code: int | None, method: str | None) -> None:
    assert not is_network_error(
        create_error(code=ABORT_CODE, status_code=status_code, method=method)
    )


def test_is_network_error_with_response() -> None:
    assert not is_network_error(create_error(code="ECONNRESET", status_code=503))


@pytest.mark.parametrize("code", ["ENOTFOUND", "CERT_HAS_EXPIRED", "HOSTNAME_MISMATCH"])
def test_is_network_error_unsafe_code(code: str) -> None:
    assert not is_network_error(create_error(code=code))


def test_is_network_error_plain_exception() -> None:
    assert not is_network_error(ValueError("boom"))


########################################
#     Tests for is_retryable_error     #
########################################


@pytest.mark.parametrize("status_code", [500, 502, 503, 504, 599])
def test_is_retryable_error_server_error(status_code: int) -> None:
    assert is_retryable_error(create_error(status_code=status_code))


@pytest.mark.parametrize("status_code", [400, 401, 404, 429, 499, 600])
def test_is_retryable_error_client_error(status_code: int) -> None:
    assert not is_retryable_error(create_error(status_code=status_code))


def test_is_retryable_error_without_response() -> None:
    assert is_retryable_error(create_error(code="ENOTFOUND"))


def test_is_retryable_error_abort_code() -> None:
    assert not is_retryable_error(create_error(code=ABORT_CODE))


def test_is_retryable_error_plain_exception() -> None:
    assert is_retryable_error(RuntimeError("boom"))


###########################################
#     Tests for is_safe_request_error     #
###########################################


@pytest.mark.parametrize("method", SAFE_HTTP_METHODS)
def test_is_safe_request_error_safe_method(method: str) -> None:
    assert is_safe_request_error(create_error(status_code=503, method=method))


@pytest.mark.parametrize("method", ["post", "put", "delete", "patch"])
def test_is_safe_request_error_unsafe_method(method: str) -> None:
    assert not is_safe_request_error(create_error(status_code=503, method=method))


def test_is_safe_request_error_uppercase_method() -> None:
    assert is_safe_request_error(create_error(status_code=500, method="GET"))


def test_is_safe_request_error_client_error() -> None:
    assert not is_safe_request_error(create_error(status_code=404, method="get"))


def test_is_safe_request_error_without_config() -> None:
    assert not is_safe_request_error(create_error(code="ECONNRESET", method=None))


#################################################
#     Tests for is_idempotent_request_error     #
#################################################


@pytest.mark.parametrize("method", IDEMPOTENT_HTTP_METHODS)
def test_is_idempotent_request_error_idempotent_method(method: str) -> None:
    assert is_idempotent_request_error(create_error(status_code=503, method=method))


@pytest.mark.parametrize("method", ["post", "patch"])
def test_is_idempotent_request_error_non_idempotent_method(method: str) -> None:
    assert not is_idempotent_request_error(create_error(status_code=503, method=method))


def test_is_idempotent_request_error_timeout() -> None:
    assert not is_idempotent_request_error(create_error(code=ABORT_CODE, method="get"))


def test_is_idempotent_request_error_without_config() -> None:
    assert not is_idempotent_request_error(create_error(status_code=503, method=None))


############################################################
#     Tests for is_network_or_idempotent_request_error     #
############################################################


def test_is_network_or_idempotent_request_error_network_error_post() -> None:
    assert is_network_or_idempotent_request_error(create_error(code="ECONNRESET", method="post"))


def test_is_network_or_idempotent_request_error_network_error_without_config() -> None:
    assert is_network_or_idempotent_request_error(create_error(code="ECONNRESET", method=None))


def test_is_network_or_idempotent_request_error_server_error_get() -> None:
    assert is_network_or_idempotent_request_error(create_error(status_code=503, method="get"))


def test_is_network_or_idempotent_request_error_server_error_post() -> None:
    assert not is_network_or_idempotent_request_error(create_error(status_code=503, method="post"))


def test_is_network_or_idempotent_request_error_abort_code() -> None:
    assert not is_network_or_idempotent_request_error(create_error(code=ABORT_CODE))


def test_is_network_or_idempotent_request_error_client_error() -> None:
    assert not is_network_or_idempotent_request_error(create_error(status_code=404))
