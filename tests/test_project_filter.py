import pytest
import responses

from sentrykit.project_filter import FilterConfig, ProjectFilterService
from sentrykit.transport import Transport

BASE = "http://localhost/api/"
FILTERS_URL = BASE + "0/projects/the-interstellar-jurisdiction/powerful-abolitionist/filters/"

WITH_LEGACY = [
    {"id": "browser-extensions", "active": False, "description": "description_1",
     "name": "name_1", "hello": "hello_1"},
    {"id": "localhost", "active": False, "description": "description_2",
     "name": "name_2", "hello": "hello_2"},
    {"id": "legacy-browsers", "active": ["ie_pre_9"], "description": "description_3",
     "name": "name_3", "hello": "hello_3"},
    {"id": "web-crawlers", "active": True, "description": "description_4",
     "name": "name_4", "hello": "hello_4"},
]

WITHOUT_LEGACY = [
    {"id": "browser-extensions", "active": True, "description": "description_1",
     "name": "name_1", "hello": "hello_1"},
    {"id": "localhost", "active": False, "description": "description_2",
     "name": "name_2", "hello": "hello_2"},
    {"id": "legacy-browsers", "active": False, "description": "description_3",
     "name": "name_3", "hello": "hello_3"},
    {"id": "web-crawlers", "active": True, "description": "description_4",
     "name": "name_4", "hello": "hello_4"},
]


@pytest.fixture
def service():
    return ProjectFilterService(Transport(base_url=BASE))


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def _body(call):
    return call.request.body.decode("utf-8").rstrip("\n")


def test_get_with_legacy_extension(service, mocked):
    mocked.add(responses.GET, FILTERS_URL, json=WITH_LEGACY)
    config, _ = service.get_filter_config(
        "the-interstellar-jurisdiction", "powerful-abolitionist"
    )
    assert config == FilterConfig(legacy_browsers=["ie_pre_9"], browser_extension=False)


def test_get_without_legacy_extension(service, mocked):
    mocked.add(responses.GET, FILTERS_URL, json=WITHOUT_LEGACY)
    config, _ = service.get_filter_config(
        "the-interstellar-jurisdiction", "powerful-abolitionist"
    )
    assert config == FilterConfig(legacy_browsers=None, browser_extension=True)


def test_get_returns_raw_filters(service, mocked):
    mocked.add(responses.GET, FILTERS_URL, json=WITH_LEGACY)
    filters, _ = service.get("the-interstellar-jurisdiction", "powerful-abolitionist")
    assert [f.id for f in filters] == [
        "browser-extensions", "localhost", "legacy-browsers", "web-crawlers"
    ]
    assert filters[2].active == ["ie_pre_9"]


def test_malformed_legacy_filter_raises(service, mocked):
    payload = [{"id": "legacy-browsers", "active": True}]
    mocked.add(responses.GET, FILTERS_URL, json=payload)
    with pytest.raises(ValueError):
        service.get_filter_config("the-interstellar-jurisdiction", "powerful-abolitionist")


def test_browser_extension_filter(service, mocked):
    url = BASE + "0/projects/test_org/test_project/filters/browser-extensions/"
    mocked.add(responses.PUT, url, status=201)
    response = service.update_browser_extensions("test_org", "test_project", True)
    assert response.status_code == 201
    assert mocked.calls[0].request.method == "PUT"
    assert _body(mocked.calls[0]) == '{"active":true}'


def test_legacy_browser_filter(service, mocked):
    url = BASE + "0/projects/test_org/test_project/filters/legacy-browsers/"
    mocked.add(responses.PUT, url, body="", status=202)
    response = service.update_legacy_browser("test_org", "test_project", ["ie_pre_9", "ie10"])
    assert response.status_code == 202
    assert mocked.calls[0].request.method == "PUT"
    assert _body(mocked.calls[0]) == '{"subfilters":["ie_pre_9","ie10"]}'