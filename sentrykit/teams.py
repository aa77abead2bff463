"""Sentry teams: records and the team API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import Response, Transport, parse_time
from .users import Avatar


@dataclass
class Team:
    """A team bound to an organization; absent fields are None."""

    id: str | None = None
    slug: str | None = None
    name: str | None = None
    date_created: datetime | None = None
    is_member: bool | None = None
    team_role: str | None = None
    has_access: bool | None = None
    is_pending: bool | None = None
    member_count: int | None = None
    avatar: Avatar | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Team:
        if not data:
            return cls()
        avatar = data.get("avatar")
        return cls(
            id=data.get("id"),
            slug=data.get("slug"),
            name=data.get("name"),
            date_created=parse_time(data.get("dateCreated")),
            is_member=data.get("isMember"),
            team_role=data.get("teamRole"),
            has_access=data.get("hasAccess"),
            is_pending=data.get("isPending"),
            member_count=data.get("memberCount"),
            avatar=None if avatar is None else Avatar.from_dict(avatar),
        )


@dataclass
class CreateTeamParams:
    """Parameters for creating a team."""

    name: str | None = field(default=None, metadata={"json": "name", "omitnone": True})
    slug: str | None = field(default=None, metadata={"json": "slug", "omitnone": True})


@dataclass
class UpdateTeamParams:
    """Parameters for updating a team."""

    name: str | None = field(default=None, metadata={"json": "name", "omitnone": True})
    slug: str | None = field(default=None, metadata={"json": "slug", "omitnone": True})


class TeamsService:
    """Access to the team API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def list(self, organization_slug: str) -> tuple[list[Team], Response]:
        """List the teams of an organization."""
        payload, response = self._send("GET", f"0/organizations/{organization_slug}/teams/")
        return [Team.from_dict(item) for item in payload or []], response

    def get(self, organization_slug: str, slug: str) -> tuple[Team, Response]:
        """Fetch one team."""
        payload, response = self._send("GET", f"0/teams/{organization_slug}/{slug}/")
        return Team.from_dict(payload), response

    def create(self, organization_slug: str, params: CreateTeamParams) -> tuple[Team, Response]:
        """Create a team in an organization."""
        payload, response = self._send(
            "POST", f"0/organizations/{organization_slug}/teams/", params
        )
        return Team.from_dict(payload), response

    def update(
        self, organization_slug: str, slug: str, params: UpdateTeamParams
    ) -> tuple[Team, Response]:
        """Update a team's settings."""
        payload, response = self._send("PUT", f"0/teams/{organization_slug}/{slug}/", params)
        return Team.from_dict(payload), response

    def delete(self, organization_slug: str, slug: str) -> Response:
        """Delete a team."""
        _, response = self._send("DELETE", f"0/teams/{organization_slug}/{slug}/")
        return response