# uwapi/envelope.py
#
# Helpers for the {meta, data} envelope the UW API wraps around every payload.
# The executor never looks inside it; these are for callers who want
# application-level failures (bad key, unknown subject, ...) as exceptions.

from __future__ import annotations

from typing import Optional

from .container import JSONContainer
from .exceptions import ApplicationError


def meta_status(container: JSONContainer) -> Optional[int]:
    """`meta.status` as an int, or None when the envelope has none."""
    status = container.search("meta", "status")
    if status is None or status.is_null():
        return None
    value = status.value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def is_ok(container: JSONContainer) -> bool:
    """True when `meta.status` is present and in the 2xx range."""
    status = meta_status(container)
    return status is not None and 200 <= status < 300


def raise_for_meta(container: JSONContainer) -> JSONContainer:
    """
    Raise ApplicationError unless the envelope reports success.
    Returns `container` so the call can be chained.
    """
    if is_ok(container):
        return container

    message = container.search("meta", "message")
    method = container.search("meta", "method")
    raise ApplicationError(
        status=meta_status(container),
        message=str(message.value) if message is not None and message.value is not None else "missing or failed meta.status",
        method=method.value if method is not None and isinstance(method.value, str) else None,
    )
