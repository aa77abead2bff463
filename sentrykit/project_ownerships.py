"""Project ownership configuration and its API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import Response, Transport, parse_time


@dataclass
class ProjectOwnership:
    """A project's ownership rules and settings."""

    raw: str = ""
    fallthrough: bool = False
    date_created: datetime | None = None
    last_updated: datetime | None = None
    is_active: bool = False
    auto_assignment: bool = False
    codeowners_auto_sync: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectOwnership:
        if not data:
            return cls()
        return cls(
            raw=data.get("raw") or "",
            fallthrough=data.get("fallthrough") or False,
            date_created=parse_time(data.get("dateCreated")),
            last_updated=parse_time(data.get("lastUpdated")),
            is_active=data.get("isActive") or False,
            auto_assignment=data.get("autoAssignment") or False,
            codeowners_auto_sync=data.get("codeownersAutoSync"),
        )


@dataclass
class UpdateProjectOwnershipParams:
    """Parameters for updating a project's ownership configuration."""

    raw: str = field(default="", metadata={"omitempty": True})
    fallthrough: bool | None = field(default=None, metadata={"omitnone": True})
    auto_assignment: bool | None = field(
        default=None, metadata={"json": "autoAssignment", "omitnone": True}
    )
    codeowners_auto_sync: bool | None = field(
        default=None, metadata={"json": "codeownersAutoSync", "omitnone": True}
    )


class ProjectOwnershipsService:
    """Access to the project ownership API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def get(
        self, organization_slug: str, project_slug: str
    ) -> tuple[ProjectOwnership, Response]:
        """Fetch a project's ownership configuration."""
        payload, response = self._send(
            "GET", f"0/projects/{organization_slug}/{project_slug}/ownership/"
        )
        return ProjectOwnership.from_dict(payload), response

    def update(
        self,
        organization_slug: str,
        project_slug: str,
        params: UpdateProjectOwnershipParams,
    ) -> tuple[ProjectOwnership, Response]:
        """Update a project's ownership configuration."""
        payload, response = self._send(
            "PUT", f"0/projects/{organization_slug}/{project_slug}/ownership/", params
        )
        return ProjectOwnership.from_dict(payload), response