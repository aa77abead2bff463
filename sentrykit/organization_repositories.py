"""Repositories linked to an organization and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, Transport, add_query, parse_time


@dataclass
class OrganizationRepositoryProvider:
    """The provider hosting a repository."""

    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OrganizationRepositoryProvider:
        if not data:
            return cls()
        return cls(id=data.get("id") or "", name=data.get("name") or "")


@dataclass
class OrganizationRepository:
    """A repository linked to an organization."""

    id: str = ""
    name: str = ""
    url: str = ""
    provider: OrganizationRepositoryProvider = field(
        default_factory=OrganizationRepositoryProvider
    )
    status: str = ""
    date_created: datetime | None = None
    integration_id: str = ""
    external_slug: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OrganizationRepository:
        if not data:
            return cls()
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            url=data.get("url") or "",
            provider=OrganizationRepositoryProvider.from_dict(data.get("provider")),
            status=data.get("status") or "",
            date_created=parse_time(data.get("dateCreated")),
            integration_id=data.get("integrationId") or "",
            external_slug=data.get("externalSlug") or "",
        )


@dataclass
class ListOrganizationRepositoriesParams(ListCursorParams):
    """Query parameters for listing repositories.

    The status is always sent: an empty status lists repositories in every state,
    whereas omitting it would list only active ones.
    """

    status: str = field(default="", metadata={"query": "status"})
    query: str = field(default="", metadata={"query": "query", "omitempty": True})


class OrganizationRepositoriesService:
    """Access to the organization repository API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def list(
        self,
        organization_slug: str,
        params: ListOrganizationRepositoriesParams | None = None,
    ) -> tuple[list[OrganizationRepository], Response]:
        """List repositories of an organization."""
        path = add_query(f"0/organizations/{organization_slug}/repos/", params)
        payload, response = self._send("GET", path)
        return [OrganizationRepository.from_dict(item) for item in payload or []], response

    def create(
        self, organization_slug: str, params: Mapping[str, Any]
    ) -> tuple[OrganizationRepository, Response]:
        """Link a repository; the fields depend on the provider."""
        payload, response = self._send(
            "POST", f"0/organizations/{organization_slug}/repos/", params
        )
        return OrganizationRepository.from_dict(payload), response

    def delete(
        self, organization_slug: str, repo_id: str
    ) -> tuple[OrganizationRepository, Response]:
        """Unlink a repository, returning it in its new state."""
        payload, response = self._send(
            "DELETE", f"0/organizations/{organization_slug}/repos/{repo_id}/"
        )
        return OrganizationRepository.from_dict(payload), response