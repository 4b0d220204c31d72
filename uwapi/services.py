"""
Service groups: one class per UW API namespace.

Each group is a frozen value holding the API key (and an optional default
timeout). Its methods are generated from the rows of `catalogue.CATALOGUE`
that belong to it, so every operation follows the same steps:

    1. match arguments to the endpoint's segments (validators.validate_segments)
    2. build the URL (urls.format_url)
    3. GET and parse it (http.call_api), returning the JSONContainer as-is

Example
-------
>>> courses = Courses("my-key")
>>> courses.info_by_catalog_number("PHYS", "234")      # doctest: +SKIP
>>> courses.info_by_catalog_number(subject="PHYS", catalog_number="234", timeout=5)  # doctest: +SKIP
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, List, Optional, Union

from .catalogue import Endpoint, endpoints_for
from .container import JSONContainer
from .http import call_api
from .urls import format_url
from .validators import ensure_key, validate_segments, validate_timeout


class _GroupTimeout:
    """Default for the per-call `timeout`: use the timeout the group was built with."""

    def __repr__(self) -> str:
        return "<group timeout>"


GROUP_TIMEOUT: Any = _GroupTimeout()


def _make_operation(owner: str, endpoint: Endpoint) -> Callable[..., JSONContainer]:
    def operation(self: "ServiceGroup", *args: Any, timeout: Any = GROUP_TIMEOUT, **kwargs: Any) -> JSONContainer:
        values = validate_segments(endpoint, args, kwargs)
        deadline = self.timeout if timeout is GROUP_TIMEOUT else validate_timeout(timeout)
        url = format_url(self.key, *endpoint.path(values))
        return call_api(url, timeout=deadline)

    parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    parameters += [
        inspect.Parameter(name, inspect.Parameter.POSITIONAL_OR_KEYWORD, annotation=str)
        for name in endpoint.params
    ]
    parameters.append(inspect.Parameter("timeout", inspect.Parameter.KEYWORD_ONLY, default=GROUP_TIMEOUT))

    operation.__name__ = endpoint.name
    operation.__qualname__ = f"{owner}.{endpoint.name}"
    operation.__signature__ = inspect.Signature(parameters, return_annotation=JSONContainer)  # type: ignore[attr-defined]
    operation.__doc__ = (
        f"GET /{endpoint.template}.json\n\n"
        "`timeout` defaults to the group's timeout; pass None for no deadline."
    )
    return operation


@dataclass(frozen=True)
class ServiceGroup:
    """Base for the service groups. Subclasses pass `group=` in the class statement."""

    group: ClassVar[str] = ""

    key: str = field(repr=False)
    timeout: Optional[Union[float, int]] = None

    def __init_subclass__(cls, group: str = "", **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.group = group
        for endpoint in endpoints_for(group):
            setattr(cls, endpoint.name, _make_operation(cls.__name__, endpoint))

    def __post_init__(self) -> None:
        ensure_key(self.key)
        validate_timeout(self.timeout)

    @classmethod
    def endpoints(cls) -> List[Endpoint]:
        return endpoints_for(cls.group)


class FoodServices(ServiceGroup, group="food_services"):
    """Menus, outlets, diets and announcements from UW Food Services."""


class Courses(ServiceGroup, group="courses"):
    """Course catalogue, class schedules, prerequisites and exam schedules."""


class Events(ServiceGroup, group="events"):
    """University events and holidays."""


class News(ServiceGroup, group="news"):
    pass


class Services(ServiceGroup, group="services"):
    pass


class Weather(ServiceGroup, group="weather"):
    """Readings from the UW weather station."""


class Terms(ServiceGroup, group="terms"):
    """Term listings and per-term schedules."""


class Resources(ServiceGroup, group="resources"):
    pass


class Codes(ServiceGroup, group="codes"):
    """Lookup tables: units, terms, groups, subjects and instruction types."""


class Buildings(ServiceGroup, group="buildings"):
    pass


class APIMeta(ServiceGroup, group="api"):
    """Information about the API itself: usage, services, methods, versions."""


class Server(ServiceGroup, group="server"):
    pass
