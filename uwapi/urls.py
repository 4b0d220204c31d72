# uwapi/urls.py
from __future__ import annotations

import re

DEFAULT_BASE_URL: str = "https://api.uwaterloo.ca/v2/"

_KEY_PARAM_RE = re.compile(r"([?&]key=)[^&#\s'\"\\)]*")


def format_url(key: str, *segments: str) -> str:
    """
    Build a request URL: ``{base}{s1}/{s2}/.../{sN}.json?key={key}``.

    Segments are joined literally with '/'. Nothing is percent-encoded, so
    callers must pass path-safe values.
    """
    if not segments:
        raise ValueError("format_url needs at least one path segment.")
    return f"{DEFAULT_BASE_URL}{'/'.join(segments)}.json?key={key}"


def redact_url(url: str) -> str:
    """
    Replace the value of every `key` query parameter in `url` with ***.

    Also works on free text that embeds URLs, such as exception messages.
    """
    return _KEY_PARAM_RE.sub(r"\1***", url)
