from __future__ import annotations

import dataclasses
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List

import pytest
import requests
import responses

import uwapi
import uwapi.http as http
from uwapi.client import Outcome, UWAPIClient, capture, create
from uwapi.exceptions import KeyMissingError, ParseError, TransportError, ValidationError
from uwapi.services import APIMeta, Courses, FoodServices

BASE = "https://api.uwaterloo.ca/v2/"
ENVELOPE = {"meta": {"status": 200, "message": "Request successful"}, "data": []}


@responses.activate
def test_food_services_menu_url() -> None:
    responses.add(responses.GET, BASE + "foodservices/menu.json", json=ENVELOPE, status=200)

    create("abc").food_services.menu()

    assert len(responses.calls) == 1
    assert responses.calls[0].request.url == "https://api.uwaterloo.ca/v2/foodservices/menu.json?key=abc"


@responses.activate
def test_courses_info_by_catalog_number_url() -> None:
    responses.add(responses.GET, BASE + "courses/PHYS/234.json", json=ENVELOPE, status=200)

    create("K").courses.info_by_catalog_number("PHYS", "234")

    assert responses.calls[0].request.url == "https://api.uwaterloo.ca/v2/courses/PHYS/234.json?key=K"


@responses.activate
def test_buildings_courses_in_room_url() -> None:
    responses.add(responses.GET, BASE + "buildings/MC/4040/courses.json", json=ENVELOPE, status=200)

    create("K").buildings.courses_in_room("MC", "4040")

    assert responses.calls[0].request.url == "https://api.uwaterloo.ca/v2/buildings/MC/4040/courses.json?key=K"


@responses.activate
def test_food_services_menu_dated_url() -> None:
    responses.add(responses.GET, BASE + "foodservices/2017/32/menu.json", json=ENVELOPE, status=200)

    create("K").food_services.menu_dated("2017", "32")

    assert responses.calls[0].request.url == "https://api.uwaterloo.ca/v2/foodservices/2017/32/menu.json?key=K"


@responses.activate
def test_terms_list_returns_navigable_container() -> None:
    responses.add(
        responses.GET,
        BASE + "terms/list.json",
        body='{"meta":{"status":200},"data":[1,2,3]}',
        status=200,
        content_type="application/json",
    )

    result = capture(create("K").terms.list)

    assert result.error is None
    assert result.container is not None
    assert result.container["data"][0].value == 1


@responses.activate
def test_non_json_body_gives_parse_error() -> None:
    responses.add(responses.GET, BASE + "weather/current.json", body="not json", status=200)

    result = capture(create("K").weather.current)

    assert result.container is None
    assert isinstance(result.error, ParseError)
    assert result.error.kind == "parse-error"
    assert result.ok is False


@responses.activate
def test_keyword_segments_and_ints() -> None:
    responses.add(responses.GET, BASE + "terms/1179/CS/246/schedule.json", json=ENVELOPE, status=200)

    create("K").terms.class_schedule_by_term(1179, subject="CS", catalog_number="246")

    assert responses.calls[0].request.url == "https://api.uwaterloo.ca/v2/terms/1179/CS/246/schedule.json?key=K"


def test_client_exposes_all_groups() -> None:
    client = create("K")

    assert isinstance(client.food_services, FoodServices)
    assert isinstance(client.courses, Courses)
    assert isinstance(client.api, APIMeta)
    for name in ("events", "news", "services", "weather", "terms", "resources", "codes", "buildings", "server"):
        assert getattr(client, name).key == "K"


def test_clients_with_same_key_are_equal() -> None:
    a = create("K")
    b = UWAPIClient("K")

    assert a == b
    assert hash(a) == hash(b)
    assert a != create("other")


def test_client_is_immutable() -> None:
    client = create("K")

    with pytest.raises(dataclasses.FrozenInstanceError):
        client.key = "other"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        client.courses.key = "other"  # type: ignore[misc]


def test_repr_hides_key() -> None:
    client = create("topsecret", timeout=5)

    assert "topsecret" not in repr(client)
    assert "topsecret" not in repr(client.courses)


def test_missing_key_is_rejected() -> None:
    with pytest.raises(KeyMissingError):
        create("")
    with pytest.raises(KeyMissingError):
        create(None)  # type: ignore[arg-type]
    with pytest.raises(KeyMissingError):
        FoodServices(123)  # type: ignore[arg-type]


def test_bad_timeout_is_rejected() -> None:
    with pytest.raises(ValidationError):
        create("K", timeout=0)
    with pytest.raises(ValidationError):
        create("K", timeout="10")  # type: ignore[arg-type]


class DummyResp:
    status_code = 200
    reason = "OK"

    def __init__(self, content: bytes) -> None:
        self.content = content

    def close(self) -> None:
        pass


def test_calls_on_one_client_do_not_affect_another(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: List[str] = []

    def fake_request(*, method: str, url: str, timeout: Any, stream: bool) -> DummyResp:
        seen.append(url)
        return DummyResp(b'{"data": "x"}')

    monkeypatch.setattr(http.requests, "request", fake_request)

    a = create("K")
    b = create("K")
    before = dataclasses.asdict(b)

    a.courses.courses_by_subject("CS")
    a.events.events_by_site_and_id("engineering", "1234")

    assert dataclasses.asdict(b) == before
    assert a == b
    b.courses.courses_by_subject("CS")
    assert seen[0] == seen[2]


def test_inputs_are_passed_through_untouched(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: List[str] = []

    def fake_request(*, method: str, url: str, timeout: Any, stream: bool) -> DummyResp:
        seen.append(url)
        return DummyResp(b"{}")

    monkeypatch.setattr(http.requests, "request", fake_request)
    client = create("K")

    client.courses.courses_by_subject("phys")
    client.courses.courses_by_subject(" CS ")

    assert seen == [
        "https://api.uwaterloo.ca/v2/courses/phys.json?key=K",
        "https://api.uwaterloo.ca/v2/courses/ CS .json?key=K",
    ]


def test_concurrent_calls_match_sequential(monkeypatch: pytest.MonkeyPatch) -> None:
    lock = threading.Lock()
    count = {"n": 0}

    def fake_request(*, method: str, url: str, timeout: Any, stream: bool) -> DummyResp:
        with lock:
            count["n"] += 1
        return DummyResp(('{"url": "%s"}' % url).encode())

    monkeypatch.setattr(http.requests, "request", fake_request)
    client = create("K")

    jobs = [
        (client.courses.info_by_catalog_number, ("PHYS", "234")),
        (client.buildings.courses_in_room, ("MC", "4040")),
        (client.food_services.menu, ()),
        (client.terms.subject_schedule_by_term, ("1179", "CS")),
        (client.server.time, ()),
        (client.news.news_by_site, ("engineering",)),
    ] * 10

    sequential = [fn(*args).value for fn, args in jobs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        concurrent = list(pool.map(lambda job: job[0](*job[1]).value, jobs))

    assert concurrent == sequential
    assert count["n"] == 2 * len(jobs)


def test_capture_returns_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_request(*, method: str, url: str, timeout: Any, stream: bool) -> DummyResp:
        raise requests.exceptions.ConnectionError("dns failure")

    monkeypatch.setattr(http.requests, "request", fake_request)

    result = capture(create("K").codes.subjects)

    assert result == Outcome(None, result.error)
    assert isinstance(result.error, TransportError)
    assert result.error.kind == "transport-error"


def test_capture_does_not_hide_programming_errors() -> None:
    def broken() -> Any:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        capture(broken)


def test_package_level_create() -> None:
    assert uwapi.create("K") == UWAPIClient("K")
