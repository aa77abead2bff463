"""Release deploys and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, Transport, add_query, parse_time


@dataclass
class ReleaseDeployment:
    """A deploy of a release to an environment."""

    id: str = ""
    name: str | None = field(default=None, metadata={"omitnone": True})
    environment: str = field(default="", metadata={"omitempty": True})
    url: str | None = field(default=None, metadata={"omitnone": True})
    projects: list[str] | None = field(default=None, metadata={"omitempty": True})
    date_started: datetime | None = field(
        default=None, metadata={"json": "dateStarted", "omitnone": True}
    )
    date_finished: datetime | None = field(
        default=None, metadata={"json": "dateFinished", "omitnone": True}
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ReleaseDeployment:
        if not data:
            return cls()
        projects = data.get("projects")
        return cls(
            id=data.get("id") or "",
            name=data.get("name"),
            environment=data.get("environment") or "",
            url=data.get("url"),
            projects=None if projects is None else list(projects),
            date_started=parse_time(data.get("dateStarted")),
            date_finished=parse_time(data.get("dateFinished")),
        )


class ReleaseDeploymentsService:
    """Access to the release deploy API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def get(
        self, organization_slug: str, version: str, deploy_id: str
    ) -> tuple[ReleaseDeployment | None, Response]:
        """Find a deploy by ID, paging through the list; None when it is absent."""
        base = f"0/organizations/{organization_slug}/releases/{version}/deploys/"
        cursor = ""
        while True:
            path = add_query(base, ListCursorParams(cursor=cursor))
            payload, response = self._send("GET", path)
            for item in payload or []:
                deployment = ReleaseDeployment.from_dict(item)
                if deployment.id == deploy_id:
                    return deployment, response
            if not response.cursor:
                return None, response
            cursor = response.cursor

    def create(
        self, organization_slug: str, version: str, params: ReleaseDeployment
    ) -> tuple[ReleaseDeployment, Response]:
        """Record a new deploy of a release."""
        payload, response = self._send(
            "POST", f"0/organizations/{organization_slug}/releases/{version}/deploys/", params
        )
        return ReleaseDeployment.from_dict(payload), response