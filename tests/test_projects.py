import json

import pytest
import responses

from sentrykit.projects import (
    CreateProjectParams,
    Project,
    ProjectsService,
    ProjectSummary,
    ProjectSummaryTeam,
    UpdateProjectParams,
)
from sentrykit.transport import ErrorResponse, Transport, parse_time

BASE = "https://sentry.example.com/api/"
ORG = "the-interstellar-jurisdiction"

PROJECT = {
    "id": "3",
    "slug": "prime-mover",
    "name": "Prime Mover",
    "isPublic": False,
    "isBookmarked": False,
    "color": "#bf5b3f",
    "dateCreated": "2017-07-18T19:29:30.063Z",
    "firstEvent": None,
    "features": ["data-forwarding", "rate-limits", "releases"],
    "status": "active",
    "platform": "python",
    "resolveAge": 0,
    "securityTokenHeader": None,
    "organization": {"id": "2", "slug": ORG, "name": "The Interstellar Jurisdiction"},
    "team": {"id": "2", "slug": "powerful-abolitionist", "name": "Powerful Abolitionist"},
    "teams": [
        {"id": "2", "slug": "powerful-abolitionist", "name": "Powerful Abolitionist"},
    ],
}


@pytest.fixture
def service():
    return ProjectsService(Transport(base_url=BASE))


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_project_from_dict_reads_nested_records():
    project = Project.from_dict(PROJECT)
    assert project.slug == PROJECT["slug"]
    assert project.features == PROJECT["features"]
    assert project.date_created == parse_time(PROJECT["dateCreated"])
    assert project.first_event is None
    assert project.security_token_header is None
    assert project.organization.slug == ORG
    assert project.team.slug == "powerful-abolitionist"
    assert [team.slug for team in project.teams] == ["powerful-abolitionist"]


def test_project_from_empty_dict_gives_defaults():
    assert Project.from_dict({}) == Project()
    assert Project.from_dict(None).teams is None


def test_project_summary_from_dict():
    summary = ProjectSummary.from_dict(
        {
            "id": "3",
            "name": "Prime Mover",
            "slug": "prime-mover",
            "platform": None,
            "platforms": [],
            "team": {"id": "2", "name": "Powerful Abolitionist", "slug": "powerful-abolitionist"},
            "teams": [],
        }
    )
    assert summary.platform is None
    assert summary.platforms == []
    assert summary.team == ProjectSummaryTeam(
        id="2", name="Powerful Abolitionist", slug="powerful-abolitionist"
    )
    assert summary.teams == []


def test_list(service, mocked):
    mocked.add("GET", f"{BASE}0/projects/", json=[PROJECT])
    projects, _ = service.list()
    assert projects == [Project.from_dict(PROJECT)]


def test_get(service, mocked):
    mocked.add("GET", f"{BASE}0/projects/{ORG}/prime-mover/", json=PROJECT)
    project, response = service.get(ORG, "prime-mover")
    assert project.id == PROJECT["id"]
    assert project.name == PROJECT["name"]
    assert response.status_code == 200


def test_create_posts_to_team(service, mocked):
    mocked.add(
        "POST", f"{BASE}0/teams/{ORG}/powerful-abolitionist/projects/", json=PROJECT, status=201
    )
    project, _ = service.create(
        ORG, "powerful-abolitionist", CreateProjectParams(name="Prime Mover", platform="python")
    )
    body = json.loads(mocked.calls[0].request.body)
    assert body == {"name": "Prime Mover", "platform": "python"}
    assert project.slug == PROJECT["slug"]


def test_update_sends_only_set_fields(service, mocked):
    mocked.add("PUT", f"{BASE}0/projects/{ORG}/prime-mover/", json=PROJECT)
    params = UpdateProjectParams(
        name="Prime Mover", resolve_age=0, allowed_domains=["*"], is_bookmarked=False
    )
    service.update(ORG, "prime-mover", params)
    body = json.loads(mocked.calls[0].request.body)
    assert body == {
        "name": "Prime Mover",
        "isBookmarked": False,
        "resolveAge": 0,
        "allowedDomains": ["*"],
    }


def test_delete(service, mocked):
    mocked.add("DELETE", f"{BASE}0/projects/{ORG}/prime-mover/", status=204)
    response = service.delete(ORG, "prime-mover")
    assert response.status_code == 204


def test_add_and_remove_team(service, mocked):
    url = f"{BASE}0/projects/{ORG}/prime-mover/teams/ancient-gabelers/"
    mocked.add("POST", url, json=PROJECT, status=201)
    mocked.add("DELETE", url, status=204)
    project, _ = service.add_team(ORG, "prime-mover", "ancient-gabelers")
    response = service.remove_team(ORG, "prime-mover", "ancient-gabelers")
    assert project.slug == PROJECT["slug"]
    assert response.status_code == 204
    assert [call.request.method for call in mocked.calls] == ["POST", "DELETE"]


def test_get_error_raises(service, mocked):
    mocked.add("GET", f"{BASE}0/projects/{ORG}/gone/", body="Bad Request", status=400)
    with pytest.raises(ErrorResponse) as info:
        service.get(ORG, "gone")
    assert info.value.detail == "Bad Request"