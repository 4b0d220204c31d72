# uwapi/validators.py
from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .catalogue import Endpoint
from .exceptions import KeyMissingError, ValidationError


def ensure_key(key: Any) -> str:
    """
    Return the API key unchanged.

    The key is opaque, so it is not stripped or otherwise normalized.
    Raises KeyMissingError if it is not a non-empty string.
    """
    if key is None:
        raise KeyMissingError()
    if not isinstance(key, str):
        raise KeyMissingError(f"UW API key must be a string, got {type(key).__name__}.")
    if not key.strip():
        raise KeyMissingError("UW API key was provided but is empty.")
    return key


def validate_timeout(timeout: Any) -> Optional[Union[float, int]]:
    """
    Validate a request deadline in seconds. None means no deadline.
    Returns the value unchanged.
    """
    if timeout is None:
        return None
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ValidationError(f"timeout must be a number of seconds or None, got {type(timeout).__name__}.")
    if not math.isfinite(timeout):
        raise ValidationError("timeout must be a finite number of seconds.")
    if timeout <= 0:
        raise ValidationError("timeout must be greater than 0.")
    return timeout


def _segment(endpoint: Endpoint, name: str, value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(
            f"{endpoint.group}.{endpoint.name}: {name} must be a str or int, got {type(value).__name__}."
        )
    return str(value)


def validate_segments(
    endpoint: Endpoint,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> Dict[str, str]:
    """
    Match positional and keyword arguments to the endpoint's parameters.

    Returns {param: segment}. Values are only converted with str(); they are
    not trimmed or re-cased.
    """
    where = f"{endpoint.group}.{endpoint.name}"
    params = endpoint.params

    if len(args) > len(params):
        raise ValidationError(
            f"{where} takes {len(params)} segment(s) ({', '.join(params) or 'none'}), got {len(args)}."
        )

    values: Dict[str, str] = {}
    for name, value in zip(params, args):
        values[name] = _segment(endpoint, name, value)

    for name, value in kwargs.items():
        if name not in params:
            raise ValidationError(f"{where} got an unexpected segment {name!r}.")
        if name in values:
            raise ValidationError(f"{where} got multiple values for segment {name!r}.")
        values[name] = _segment(endpoint, name, value)

    missing = [p for p in params if p not in values]
    if missing:
        raise ValidationError(f"{where} is missing segment(s): {', '.join(missing)}.")
    return values
