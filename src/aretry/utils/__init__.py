r"""Utility functions used by the interceptor client and the retry
conditions."""

from __future__ import annotations

__all__ = [
    "apply_transforms",
    "error_code_from_exception",
    "is_retry_allowed",
    "json_transform",
]

from aretry.utils.error_codes import error_code_from_exception
from aretry.utils.retry_allowed import is_retry_allowed
from aretry.utils.transform import apply_transforms, json_transform
