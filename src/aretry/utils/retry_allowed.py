r"""Table of low-level error codes that are safe to retry.

Some failures without a server response are permanent or unsafe to
repeat, for instance DNS resolution failures or TLS certificate errors.
``is_retry_allowed`` tells them apart from transient failures.
"""

from __future__ import annotations

__all__ = ["ALWAYS_RETRY_CODES", "NEVER_RETRY_CODES", "is_retry_allowed"]

ALWAYS_RETRY_CODES = frozenset(
    {
        "ETIMEDOUT",
        "ECONNRESET",
        "EADDRINUSE",
        "ESOCKETTIMEDOUT",
        "ECONNREFUSED",
        "EPIPE",
        "EHOSTUNREACH",
        "EAI_AGAIN",
    }
)

NEVER_RETRY_CODES = frozenset(
    {
        "ENOTFOUND",
        "ENETUNREACH",
        # TLS and certificate failures
        "UNABLE_TO_GET_ISSUER_CERT",
        "UNABLE_TO_GET_CRL",
        "UNABLE_TO_DECRYPT_CERT_SIGNATURE",
        "UNABLE_TO_DECRYPT_CRL_SIGNATURE",
        "UNABLE_TO_DECODE_ISSUER_PUBLIC_KEY",
        "CERT_SIGNATURE_FAILURE",
        "CRL_SIGNATURE_FAILURE",
        "CERT_NOT_YET_VALID",
        "CERT_HAS_EXPIRED",
        "CRL_NOT_YET_VALID",
        "CRL_HAS_EXPIRED",
        "ERROR_IN_CERT_NOT_BEFORE_FIELD",
        "ERROR_IN_CERT_NOT_AFTER_FIELD",
        "ERROR_IN_CRL_LAST_UPDATE_FIELD",
        "ERROR_IN_CRL_NEXT_UPDATE_FIELD",
        "OUT_OF_MEM",
        "DEPTH_ZERO_SELF_SIGNED_CERT",
        "SELF_SIGNED_CERT_IN_CHAIN",
        "UNABLE_TO_GET_ISSUER_CERT_LOCALLY",
        "UNABLE_TO_VERIFY_LEAF_SIGNATURE",
        "CERT_CHAIN_TOO_LONG",
        "CERT_REVOKED",
        "INVALID_CA",
        "PATH_LENGTH_EXCEEDED",
        "INVALID_PURPOSE",
        "CERT_UNTRUSTED",
        "CERT_REJECTED",
        "HOSTNAME_MISMATCH",
        # Malformed requests raised by the client
        "ERR_INVALID_URL",
        "ERR_BAD_REQUEST",
        # Undecodable responses
        "ERR_BAD_RESPONSE",
    }
)


def is_retry_allowed(error: BaseException | None) -> bool:
    """Return whether the error code is safe to retry.

    Args:
        error: The error to inspect. Its ``code`` attribute is looked up.

    Returns:
        ``False`` for a code known to be unsafe, ``True`` otherwise,
        including a missing error or code.

    Example:
        ```pycon
        >>> from aretry import HttpRequestError
        >>> from aretry.utils.retry_allowed import is_retry_allowed
        >>> is_retry_allowed(HttpRequestError("reset", code="ECONNRESET"))
        True
        >>> is_retry_allowed(HttpRequestError("dns", code="ENOTFOUND"))
        False

        ```
    """
    if error is None:
        return True
    code = getattr(error, "code", None)
    if code in ALWAYS_RETRY_CODES:
        return True
    return code not in NEVER_RETRY_CODES
