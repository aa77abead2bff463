import json

import pytest
import responses

from sentrykit.teams import CreateTeamParams, Team, TeamsService, UpdateTeamParams
from sentrykit.transport import ErrorResponse, Transport, parse_time
from sentrykit.users import Avatar

BASE = "https://sentry.example.com/api/"
ORG = "the-interstellar-jurisdiction"


@pytest.fixture
def service():
    return TeamsService(Transport(base_url=BASE))


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_list(service, mocked):
    mocked.add(
        "GET",
        f"{BASE}0/organizations/{ORG}/teams/",
        json=[
            {
                "id": "3",
                "slug": "ancient-gabelers",
                "name": "Ancient Gabelers",
                "dateCreated": "2017-07-18T19:29:46.305Z",
                "isMember": False,
                "teamRole": "admin",
                "hasAccess": True,
                "isPending": False,
                "memberCount": 1,
                "avatar": {"avatarType": "letter_avatar", "avatarUuid": None},
                "externalTeams": [],
                "projects": [],
            },
            {
                "id": "2",
                "slug": "powerful-abolitionist",
                "name": "Powerful Abolitionist",
                "dateCreated": "2017-07-18T19:29:24.743Z",
                "isMember": False,
                "teamRole": "admin",
                "hasAccess": True,
                "isPending": False,
                "memberCount": 1,
                "avatar": {"avatarType": "letter_avatar", "avatarUuid": None},
                "externalTeams": [],
                "projects": [
                    {"slug": "prime-mover", "id": "3", "name": "Prime Mover"},
                ],
            },
        ],
    )
    teams, _ = service.list(ORG)
    assert teams == [
        Team(
            id="3",
            slug="ancient-gabelers",
            name="Ancient Gabelers",
            date_created=parse_time("2017-07-18T19:29:46.305Z"),
            is_member=False,
            team_role="admin",
            has_access=True,
            is_pending=False,
            member_count=1,
            avatar=Avatar(type="letter_avatar"),
        ),
        Team(
            id="2",
            slug="powerful-abolitionist",
            name="Powerful Abolitionist",
            date_created=parse_time("2017-07-18T19:29:24.743Z"),
            is_member=False,
            team_role="admin",
            has_access=True,
            is_pending=False,
            member_count=1,
            avatar=Avatar(type="letter_avatar"),
        ),
    ]


def test_get(service, mocked):
    mocked.add(
        "GET",
        f"{BASE}0/teams/{ORG}/powerful-abolitionist/",
        json={
            "slug": "powerful-abolitionist",
            "name": "Powerful Abolitionist",
            "hasAccess": True,
            "isPending": False,
            "dateCreated": "2017-07-18T19:29:24.743Z",
            "isMember": False,
            "organization": {
                "name": "The Interstellar Jurisdiction",
                "slug": ORG,
                "avatar": {"avatarUuid": None, "avatarType": "letter_avatar"},
                "dateCreated": "2017-07-18T19:29:24.565Z",
                "id": "2",
                "isEarlyAdopter": False,
            },
            "id": "2",
        },
    )
    team, _ = service.get(ORG, "powerful-abolitionist")
    assert team == Team(
        id="2",
        slug="powerful-abolitionist",
        name="Powerful Abolitionist",
        date_created=parse_time("2017-07-18T19:29:24.743Z"),
        has_access=True,
        is_pending=False,
        is_member=False,
    )


def test_create(service, mocked):
    mocked.add(
        "POST",
        f"{BASE}0/organizations/{ORG}/teams/",
        json={
            "slug": "ancient-gabelers",
            "name": "Ancient Gabelers",
            "hasAccess": True,
            "isPending": False,
            "dateCreated": "2017-07-18T19:29:46.305Z",
            "isMember": False,
            "id": "3",
        },
    )
    team, _ = service.create(ORG, CreateTeamParams(name="Ancient Gabelers"))
    assert json.loads(mocked.calls[0].request.body) == {"name": "Ancient Gabelers"}
    assert team == Team(
        id="3",
        slug="ancient-gabelers",
        name="Ancient Gabelers",
        date_created=parse_time("2017-07-18T19:29:46.305Z"),
        has_access=True,
        is_pending=False,
        is_member=False,
    )


def test_update(service, mocked):
    mocked.add(
        "PUT",
        f"{BASE}0/teams/{ORG}/the-obese-philosophers/",
        json={
            "slug": "the-obese-philosophers",
            "name": "The Inflated Philosophers",
            "hasAccess": True,
            "isPending": False,
            "dateCreated": "2017-07-18T19:30:14.736Z",
            "isMember": False,
            "id": "4",
        },
    )
    team, _ = service.update(
        ORG, "the-obese-philosophers", UpdateTeamParams(name="The Inflated Philosophers")
    )
    assert json.loads(mocked.calls[0].request.body) == {"name": "The Inflated Philosophers"}
    assert team == Team(
        id="4",
        slug="the-obese-philosophers",
        name="The Inflated Philosophers",
        date_created=parse_time("2017-07-18T19:30:14.736Z"),
        has_access=True,
        is_pending=False,
        is_member=False,
    )


def test_delete(service, mocked):
    mocked.add("DELETE", f"{BASE}0/teams/{ORG}/the-obese-philosophers/", status=204)
    response = service.delete(ORG, "the-obese-philosophers")
    assert response.status_code == 204
    assert mocked.calls[0].request.method == "DELETE"


def test_get_missing_team_raises(service, mocked):
    mocked.add(
        "GET",
        f"{BASE}0/teams/{ORG}/nobody/",
        json={"detail": "The requested resource does not exist"},
        status=404,
    )
    with pytest.raises(ErrorResponse) as info:
        service.get(ORG, "nobody")
    assert info.value.detail == "The requested resource does not exist"