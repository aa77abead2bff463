import pytest
import responses

from sentrykit.pagerduty import (
    PagerdutyIntegration,
    PagerdutyService,
    PagerdutyServiceEntry,
    service_map,
)
from sentrykit.transport import ErrorResponse, Transport

BASE = "http://localhost/api/"
URL = BASE + "0/organizations/the-interstellar-jurisdiction/integrations/456789/"

PAYLOAD = {
    "id": "456789",
    "name": "Interstellar PagerDuty",
    "configData": {
        "service_table": [
            {"service": "testing123", "integration_key": "placeholder", "id": 22222},
            {"service": "testing456", "integration_key": "placeholder", "id": 33333},
        ]
    },
    "externalId": "999999",
    "organizationId": 2,
    "organizationIntegrationStatus": "active",
}


@pytest.fixture
def service():
    return PagerdutyService(Transport(base_url=BASE))


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_get(service, mocked):
    mocked.add(responses.GET, URL, json=PAYLOAD)
    integration, _ = service.get("the-interstellar-jurisdiction", 456789)
    assert integration.id == "456789"
    assert integration.organization_id == 2
    assert integration.service_table[0] == PagerdutyServiceEntry(
        service="testing123", integration_key="placeholder", id=22222
    )


def test_service_map(service, mocked):
    mocked.add(responses.GET, URL, json=PAYLOAD)
    integration, _ = service.get("the-interstellar-jurisdiction", 456789)
    assert service_map(integration) == {"testing123": "22222", "testing456": "33333"}


def test_missing_config_gives_empty_table():
    integration = PagerdutyIntegration.from_dict({"id": "1", "configData": None})
    assert integration.service_table == []
    assert service_map(integration) == {}


def test_get_error(service, mocked):
    mocked.add(responses.GET, URL, json={"detail": "Not found"}, status=404)
    with pytest.raises(ErrorResponse) as info:
        service.get("the-interstellar-jurisdiction", 456789)
    assert info.value.detail == "Not found"