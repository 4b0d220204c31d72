# uwapi/catalogue.py
#
# Every supported UW API v2 endpoint, one row each. Service groups build their
# methods from this table, so adding an endpoint means adding a row here.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class Endpoint:
    """
    One API operation.

    `template` is the path without base or `.json`, segments separated by '/'.
    Segments written as ``{name}`` are supplied by the caller, in order of
    appearance; the rest are fixed.
    """

    group: str
    name: str
    template: str
    segments: Tuple[str, ...] = field(init=False, repr=False)
    params: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        segments = tuple(self.template.split("/"))
        params = tuple(s[1:-1] for s in segments if _is_placeholder(s))
        if len(set(params)) != len(params):
            raise ValueError(f"Duplicate placeholder in endpoint template {self.template!r}.")
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "params", params)

    @property
    def fixed(self) -> Tuple[str, ...]:
        """The literal segments, in order."""
        return tuple(s for s in self.segments if not _is_placeholder(s))

    def path(self, values: Mapping[str, str]) -> Tuple[str, ...]:
        """Substitute caller values into the template and return the segments."""
        return tuple(values[s[1:-1]] if _is_placeholder(s) else s for s in self.segments)


def _is_placeholder(segment: str) -> bool:
    return len(segment) > 2 and segment.startswith("{") and segment.endswith("}")


CATALOGUE: Tuple[Endpoint, ...] = (
    # food services
    Endpoint("food_services", "menu", "foodservices/menu"),
    Endpoint("food_services", "notes", "foodservices/notes"),
    Endpoint("food_services", "diets", "foodservices/diets"),
    Endpoint("food_services", "outlets", "foodservices/outlets"),
    Endpoint("food_services", "locations", "foodservices/locations"),
    Endpoint("food_services", "watcard", "foodservices/watcard"),
    Endpoint("food_services", "announcements", "foodservices/announcements"),
    Endpoint("food_services", "products", "foodservices/products/{product_id}"),
    Endpoint("food_services", "menu_dated", "foodservices/{year}/{week}/menu"),
    Endpoint("food_services", "notes_dated", "foodservices/{year}/{week}/notes"),
    Endpoint("food_services", "announcements_dated", "foodservices/{year}/{week}/announcements"),
    # courses
    Endpoint("courses", "courses_by_subject", "courses/{subject}"),
    Endpoint("courses", "info_by_id", "courses/{course_id}"),
    Endpoint("courses", "schedule_by_id", "courses/{class_number}/schedule"),
    Endpoint("courses", "info_by_catalog_number", "courses/{subject}/{catalog_number}"),
    Endpoint("courses", "schedule_by_catalog_number", "courses/{subject}/{catalog_number}/schedule"),
    Endpoint("courses", "prereqs_by_catalog_number", "courses/{subject}/{catalog_number}/prerequisites"),
    Endpoint("courses", "exam_schedule_by_catalog_number", "courses/{subject}/{catalog_number}/examschedule"),
    # events
    Endpoint("events", "all", "events"),
    Endpoint("events", "events_by_site", "events/{site}"),
    Endpoint("events", "events_by_site_and_id", "events/{site}/{event_id}"),
    Endpoint("events", "holidays", "events/holidays"),
    # news
    Endpoint("news", "all", "news"),
    Endpoint("news", "news_by_site", "news/{site}"),
    Endpoint("news", "news_by_site_and_id", "news/{site}/{news_id}"),
    # services
    Endpoint("services", "services_by_site", "services/{site}"),
    # weather
    Endpoint("weather", "current", "weather/current"),
    # terms
    Endpoint("terms", "list", "terms/list"),
    Endpoint("terms", "exam_schedule_by_term", "terms/{term}/examschedule"),
    Endpoint("terms", "subject_schedule_by_term", "terms/{term}/{subject}/schedule"),
    Endpoint("terms", "class_schedule_by_term", "terms/{term}/{subject}/{catalog_number}/schedule"),
    Endpoint("terms", "info_sessions_by_term", "terms/{term}/infosessions"),
    # resources
    Endpoint("resources", "tutors", "resources/tutors"),
    Endpoint("resources", "printers", "resources/printers"),
    Endpoint("resources", "info_sessions", "resources/infosessions"),
    Endpoint("resources", "goosewatch", "resources/goosewatch"),
    # codes
    Endpoint("codes", "units", "codes/units"),
    Endpoint("codes", "terms", "codes/terms"),
    Endpoint("codes", "groups", "codes/groups"),
    Endpoint("codes", "subjects", "codes/subjects"),
    Endpoint("codes", "instructions", "codes/instructions"),
    # buildings
    Endpoint("buildings", "list", "buildings/list"),
    Endpoint("buildings", "details_by_code", "buildings/{code}"),
    Endpoint("buildings", "courses_in_room", "buildings/{code}/{room_number}/courses"),
    # api meta
    Endpoint("api", "usage", "api/usage"),
    Endpoint("api", "services", "api/services"),
    Endpoint("api", "methods", "api/methods"),
    Endpoint("api", "versions", "api/versions"),
    Endpoint("api", "changelog", "api/changelog"),
    # server
    Endpoint("server", "time", "server/time"),
    Endpoint("server", "codes", "server/codes"),
)

GROUPS: Tuple[str, ...] = tuple(dict.fromkeys(ep.group for ep in CATALOGUE))


def endpoints_for(group: str) -> List[Endpoint]:
    """All rows of `group`, in table order. Raises KeyError for an unknown group."""
    rows = [ep for ep in CATALOGUE if ep.group == group]
    if not rows:
        raise KeyError(group)
    return rows


def _build_index() -> Dict[Tuple[str, str], Endpoint]:
    index: Dict[Tuple[str, str], Endpoint] = {}
    for ep in CATALOGUE:
        key = (ep.group, ep.name)
        if key in index:
            raise ValueError(f"Duplicate endpoint {ep.group}.{ep.name} in catalogue.")
        index[key] = ep
    return index


_INDEX = _build_index()


def lookup(group: str, name: str) -> Endpoint:
    """Return the row for `group.name`. Raises KeyError if there is none."""
    return _INDEX[(group, name)]
