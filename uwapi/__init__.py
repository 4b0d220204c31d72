"""
uwapi package public interface.

    >>> import uwapi
    >>> client = uwapi.create("my-key")
    >>> menu = client.food_services.menu()           # doctest: +SKIP
    >>> menu["data"]["outlets"][0]["outlet_name"].value  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from typing import List

from .catalogue import CATALOGUE, GROUPS, Endpoint, endpoints_for, lookup
from .client import Outcome, UWAPIClient, capture, create
from .container import JSONContainer
from .envelope import is_ok, meta_status, raise_for_meta
from .exceptions import (
    ApplicationError,
    HTTPStatusError,
    KeyMissingError,
    ParseError,
    ReadError,
    TransportError,
    UWAPIError,
    ValidationError,
)
from .http import call_api
from .services import (
    APIMeta,
    Buildings,
    Codes,
    Courses,
    Events,
    FoodServices,
    News,
    Resources,
    Server,
    Services,
    ServiceGroup,
    Terms,
    Weather,
)
from .urls import DEFAULT_BASE_URL, format_url, redact_url

__version__: str = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: List[str] = [
    "DEFAULT_BASE_URL",
    "__version__",
    "create",
    "UWAPIClient",
    "capture",
    "Outcome",
    "JSONContainer",
    "call_api",
    "format_url",
    "redact_url",
    "CATALOGUE",
    "GROUPS",
    "Endpoint",
    "endpoints_for",
    "lookup",
    "meta_status",
    "is_ok",
    "raise_for_meta",
    "ServiceGroup",
    "FoodServices",
    "Courses",
    "Events",
    "News",
    "Services",
    "Weather",
    "Terms",
    "Resources",
    "Codes",
    "Buildings",
    "APIMeta",
    "Server",
    "UWAPIError",
    "KeyMissingError",
    "ValidationError",
    "TransportError",
    "ReadError",
    "ParseError",
    "HTTPStatusError",
    "ApplicationError",
]
