# uwapi/http.py
#
# Request executor shared by every uwapi operation.
#
# - Issues one GET per call via `requests.request` and reads the whole body.
# - Parses the body as JSON and returns it wrapped in a JSONContainer.
# - Maps failures onto the uwapi error taxonomy:
#     * nothing received (DNS, connect, TLS, timeout) -> TransportError
#     * body cut off or undecodable mid-transfer       -> ReadError
#     * body is not JSON                               -> ParseError
#     * body is not JSON and status >= 400             -> HTTPStatusError
# - A JSON body is returned whatever the HTTP status; the upstream reports its
#   own failures inside the {meta, data} envelope (see envelope.py).
# - No lock, no retry: calls are independent and may run from any thread.
# - The API key is redacted from every log record and error message.

from __future__ import annotations

import logging
from typing import Optional, Union

import requests
import urllib3.exceptions
from requests import Response

from .container import JSONContainer
from .exceptions import HTTPStatusError, ParseError, ReadError, TransportError
from .parsing import parse_json
from .urls import redact_url

logger = logging.getLogger(__name__)

Timeout = Optional[Union[float, int]]

_READ_ERRORS = (
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ContentDecodingError,
    requests.exceptions.ConnectionError,
    urllib3.exceptions.HTTPError,
)


def _send(url: str, timeout: Timeout) -> Response:
    return requests.request(
        method="GET",
        url=url,
        timeout=timeout,
        stream=True,
    )


def _read_body(resp: Response, safe_url: str) -> bytes:
    try:
        return resp.content
    except _READ_ERRORS as e:
        raise ReadError(f"Failed to read response body from {safe_url}: {redact_url(repr(e))}") from e
    finally:
        resp.close()


def call_api(url: str, *, timeout: Timeout = None) -> JSONContainer:
    """
    GET `url` and return its JSON body as a JSONContainer.

    `timeout` is passed to requests unchanged; None means no deadline beyond
    the transport default.

    Raises TransportError, ReadError, ParseError or HTTPStatusError.
    """
    safe_url = redact_url(url)
    logger.debug("GET %s (timeout=%s)", safe_url, timeout)

    try:
        resp = _send(url, timeout)
    except requests.RequestException as e:
        raise TransportError(f"Request failed for GET {safe_url}: {redact_url(repr(e))}") from e

    body = _read_body(resp, safe_url)
    logger.debug("GET %s -> HTTP %s, %d bytes", safe_url, resp.status_code, len(body))

    try:
        return parse_json(body, url=safe_url)
    except ParseError as e:
        if resp.status_code >= 400:
            raise HTTPStatusError(
                status_code=resp.status_code,
                message=f"{resp.reason or 'error'}; body is not JSON: {e.message}",
                url=safe_url,
            ) from e
        raise
