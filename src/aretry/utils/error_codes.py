r"""Mapping from httpx transport exceptions to symbolic error codes."""

from __future__ import annotations

__all__ = ["DEFAULT_ERROR_CODE", "error_code_from_exception"]

import errno
import socket
import ssl
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Iterator

DEFAULT_ERROR_CODE = "ERR_NETWORK"

# OpenSSL X509_V_ERR_* values
_CERT_ERROR_CODES = {
    9: "CERT_NOT_YET_VALID",
    10: "CERT_HAS_EXPIRED",
    18: "DEPTH_ZERO_SELF_SIGNED_CERT",
    19: "SELF_SIGNED_CERT_IN_CHAIN",
    20: "UNABLE_TO_GET_ISSUER_CERT_LOCALLY",
    21: "UNABLE_TO_VERIFY_LEAF_SIGNATURE",
    23: "CERT_REVOKED",
    62: "HOSTNAME_MISMATCH",
}

# Order matters: subclasses first
_HTTPX_ERROR_CODES: tuple[tuple[type[httpx.TransportError], str], ...] = (
    (httpx.ProxyError, "ECONNREFUSED"),
    (httpx.UnsupportedProtocol, "ERR_INVALID_URL"),
    (httpx.LocalProtocolError, "ERR_BAD_REQUEST"),
    (httpx.RemoteProtocolError, "ECONNRESET"),
    (httpx.ConnectError, "ECONNREFUSED"),
    (httpx.ReadError, "ECONNRESET"),
    (httpx.WriteError, "EPIPE"),
)


def _iter_causes(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _code_from_os_error(exc: BaseException) -> str | None:
    if isinstance(exc, ssl.SSLCertVerificationError):
        return _CERT_ERROR_CODES.get(getattr(exc, "verify_code", None), "CERT_UNTRUSTED")
    if isinstance(exc, socket.gaierror):
        return "EAI_AGAIN" if exc.errno == socket.EAI_AGAIN else "ENOTFOUND"
    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    return None


def error_code_from_exception(exc: BaseException) -> str:
    """Return the symbolic code describing a transport failure.

    The exception chain is searched for the underlying OS or TLS error
    first. If none is found, the code is derived from the httpx
    exception class.

    Args:
        exc: The exception raised by the transport.

    Returns:
        The error code, e.g. ``"ECONNREFUSED"`` or ``"CERT_HAS_EXPIRED"``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.utils.error_codes import error_code_from_exception
        >>> error_code_from_exception(httpx.ReadError("connection reset"))
        'ECONNRESET'

        ```
    """
    for cause in _iter_causes(exc):
        code = _code_from_os_error(cause)
        if code is not None:
            return code
    for error_type, code in _HTTPX_ERROR_CODES:
        if isinstance(exc, error_type):
            return code
    return DEFAULT_ERROR_CODE
