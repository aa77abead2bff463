"""Client keys bound to a project and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, Transport, add_query, parse_time


@dataclass
class ProjectKeyRateLimit:
    """A client key's rate limit: ``count`` events per ``window`` seconds."""

    window: int = 0
    count: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectKeyRateLimit:
        if not data:
            return cls()
        return cls(window=data.get("window") or 0, count=data.get("count") or 0)


@dataclass
class ProjectKeyDSN:
    """The DSNs of a client key."""

    secret: str = ""
    public: str = ""
    csp: str = ""
    security: str = ""
    minidump: str = ""
    cdn: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectKeyDSN:
        if not data:
            return cls()
        return cls(
            secret=data.get("secret") or "",
            public=data.get("public") or "",
            csp=data.get("csp") or "",
            security=data.get("security") or "",
            minidump=data.get("minidump") or "",
            cdn=data.get("cdn") or "",
        )


@dataclass
class ProjectKey:
    """A client key bound to a project."""

    id: str = ""
    name: str = ""
    label: str = ""
    public: str = ""
    secret: str = ""
    project_id: int = 0
    is_active: bool = False
    rate_limit: ProjectKeyRateLimit | None = None
    dsn: ProjectKeyDSN = field(default_factory=ProjectKeyDSN)
    date_created: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectKey:
        if not data:
            return cls()
        rate_limit = data.get("rateLimit")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            label=data.get("label") or "",
            public=data.get("public") or "",
            secret=data.get("secret") or "",
            project_id=data.get("projectId") or 0,
            is_active=data.get("isActive") or False,
            rate_limit=None if rate_limit is None else ProjectKeyRateLimit.from_dict(rate_limit),
            dsn=ProjectKeyDSN.from_dict(data.get("dsn")),
            date_created=parse_time(data.get("dateCreated")),
        )


@dataclass
class CreateProjectKeyParams:
    """Parameters for creating a client key."""

    name: str = field(default="", metadata={"omitempty": True})
    rate_limit: ProjectKeyRateLimit | None = field(
        default=None, metadata={"json": "rateLimit", "omitnone": True}
    )


@dataclass
class UpdateProjectKeyParams:
    """Parameters for updating a client key."""

    name: str = field(default="", metadata={"omitempty": True})
    rate_limit: ProjectKeyRateLimit | None = field(
        default=None, metadata={"json": "rateLimit", "omitnone": True}
    )


class ProjectKeysService:
    """Access to the project client key API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def list(
        self,
        organization_slug: str,
        project_slug: str,
        params: ListCursorParams | None = None,
    ) -> tuple[list[ProjectKey], Response]:
        """List client keys bound to a project."""
        path = add_query(f"0/projects/{organization_slug}/{project_slug}/keys/", params)
        payload, response = self._send("GET", path)
        return [ProjectKey.from_dict(item) for item in payload or []], response

    def create(
        self, organization_slug: str, project_slug: str, params: CreateProjectKeyParams
    ) -> tuple[ProjectKey, Response]:
        """Create a client key."""
        payload, response = self._send(
            "POST", f"0/projects/{organization_slug}/{project_slug}/keys/", params
        )
        return ProjectKey.from_dict(payload), response

    def update(
        self,
        organization_slug: str,
        project_slug: str,
        key_id: str,
        params: UpdateProjectKeyParams,
    ) -> tuple[ProjectKey, Response]:
        """Update a client key."""
        payload, response = self._send(
            "PUT", f"0/projects/{organization_slug}/{project_slug}/keys/{key_id}/", params
        )
        return ProjectKey.from_dict(payload), response

    def delete(self, organization_slug: str, project_slug: str, key_id: str) -> Response:
        """Delete a client key."""
        _, response = self._send(
            "DELETE", f"0/projects/{organization_slug}/{project_slug}/keys/{key_id}/"
        )
        return response