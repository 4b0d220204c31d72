from __future__ import annotations

import json
from typing import Optional, Union

from .container import JSONContainer
from .exceptions import ParseError


def _snippet(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    snippet = body[:300].replace("\r", "\\r").replace("\n", "\\n")
    return snippet


def parse_json(body: Union[bytes, str], url: Optional[str] = None) -> JSONContainer:
    """
    Parse a response body into a JSONContainer.

    Bytes are decoded by json.loads itself (UTF-8/16/32 detection). Any
    decoding problem is raised as ParseError, with `url` (already redacted)
    and the start of the body in the message.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        where = f" from {url}" if url else ""
        raise ParseError(
            f"Response{where} is not valid JSON: {e}. Response starts with: '{_snippet(body)}'"
        ) from e
    return JSONContainer(data)
