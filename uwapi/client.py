# uwapi/client.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Optional, Union

from .container import JSONContainer
from .exceptions import UWAPIError
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
    Terms,
    Weather,
)
from .validators import ensure_key, validate_timeout


@dataclass(frozen=True)
class UWAPIClient:
    """Every UW API v2 service group, sharing one key."""

    key: str = field(repr=False)
    timeout: Optional[Union[float, int]] = None

    food_services: FoodServices = field(init=False, repr=False)
    courses: Courses = field(init=False, repr=False)
    events: Events = field(init=False, repr=False)
    news: News = field(init=False, repr=False)
    services: Services = field(init=False, repr=False)
    weather: Weather = field(init=False, repr=False)
    terms: Terms = field(init=False, repr=False)
    resources: Resources = field(init=False, repr=False)
    codes: Codes = field(init=False, repr=False)
    buildings: Buildings = field(init=False, repr=False)
    api: APIMeta = field(init=False, repr=False)
    server: Server = field(init=False, repr=False)

    def __post_init__(self) -> None:
        ensure_key(self.key)
        validate_timeout(self.timeout)

        groups = {
            "food_services": FoodServices,
            "courses": Courses,
            "events": Events,
            "news": News,
            "services": Services,
            "weather": Weather,
            "terms": Terms,
            "resources": Resources,
            "codes": Codes,
            "buildings": Buildings,
            "api": APIMeta,
            "server": Server,
        }
        for name, cls in groups.items():
            object.__setattr__(self, name, cls(self.key, timeout=self.timeout))


def create(key: str, timeout: Optional[Union[float, int]] = None) -> UWAPIClient:
    """Construct a client for `key`. `timeout` (seconds) applies to every call unless overridden."""
    return UWAPIClient(key, timeout=timeout)


class Outcome(NamedTuple):
    """A (container, error) pair: exactly one of the two is None."""

    container: Optional[JSONContainer]
    error: Optional[UWAPIError]

    @property
    def ok(self) -> bool:
        return self.error is None


def capture(operation: Callable[..., JSONContainer], *args: Any, **kwargs: Any) -> Outcome:
    """
    Call `operation(*args, **kwargs)` and report the result as an Outcome
    instead of raising.

    Only UWAPIError is captured; anything else propagates.

        result = capture(client.terms.list)
        if result.error is not None:
            print(result.error.kind)
    """
    try:
        return Outcome(operation(*args, **kwargs), None)
    except UWAPIError as e:
        return Outcome(None, e)
