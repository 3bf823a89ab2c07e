r"""Request body transforms applied before a request is sent."""

from __future__ import annotations

__all__ = ["Transform", "apply_transforms", "json_transform"]

import json
from collections.abc import Callable, Iterable
from typing import Any

Transform = Callable[[Any, dict[str, str]], Any]


def _has_header(headers: dict[str, str], name: str) -> bool:
    return any(key.lower() == name for key in headers)


def json_transform(data: Any, headers: dict[str, str]) -> Any:
    """Serialize the request body.

    Dictionaries and lists are encoded as JSON and the ``Content-Type``
    header is set if missing. Strings are encoded as UTF-8. Other values
    are returned unchanged.

    Example:
        ```pycon
        >>> from aretry.utils.transform import json_transform
        >>> headers = {}
        >>> json_transform({"key": "value"}, headers)
        b'{"key": "value"}'
        >>> headers
        {'Content-Type': 'application/json'}

        ```
    """
    if isinstance(data, (dict, list)):
        if not _has_header(headers, "content-type"):
            headers["Content-Type"] = "application/json"
        return json.dumps(data).encode("utf-8")
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def apply_transforms(data: Any, headers: dict[str, str], transforms: Iterable[Transform]) -> Any:
    """Apply each transform in order and return the final body."""
    for transform in transforms:
        data = transform(data, headers)
    return data
