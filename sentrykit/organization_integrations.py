"""Organization integrations and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, add_query, parse_time
from .users import _decode_record, _Endpoint, _field


@dataclass
class OrganizationIntegrationProvider:
    """The provider behind an integration."""

    key: str = ""
    slug: str = ""
    name: str = ""
    can_add: bool = False
    can_disable: bool = False
    features: list[str] | None = _field(decode=list, default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OrganizationIntegrationProvider:
        return _decode_record(cls, data)


@dataclass
class OrganizationIntegration:
    """An integration added to an organization."""

    id: str = ""
    name: str = ""
    icon: str | None = None
    domain_name: str = ""
    account_type: str | None = None
    scopes: list[str] | None = _field(decode=list, default=None)
    status: str = ""
    provider: OrganizationIntegrationProvider = _field(
        decode=OrganizationIntegrationProvider.from_dict,
        default_factory=OrganizationIntegrationProvider,
    )
    config_data: dict[str, Any] | None = _field(decode=dict, default=None)
    external_id: str = ""
    organization_id: int = 0
    organization_integration_status: str = ""
    grace_period_end: datetime | None = _field(decode=parse_time, default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OrganizationIntegration:
        return _decode_record(cls, data)


@dataclass
class ListOrganizationIntegrationsParams(ListCursorParams):
    """Query parameters for listing integrations."""

    provider_key: str = field(default="", metadata={"query": "provider_key", "omitempty": True})


class OrganizationIntegrationsService(_Endpoint):
    """Access to the organization integration API endpoints."""

    @staticmethod
    def _path(organization_slug: str, integration_id: str | None = None) -> str:
        base = f"0/organizations/{organization_slug}/integrations/"
        return base if integration_id is None else f"{base}{integration_id}/"

    def list(
        self,
        organization_slug: str,
        params: ListOrganizationIntegrationsParams | None = None,
    ) -> tuple[list[OrganizationIntegration], Response]:
        """List integrations of an organization."""
        payload, response = self._send("GET", add_query(self._path(organization_slug), params))
        return [OrganizationIntegration.from_dict(item) for item in payload or []], response

    def get(
        self, organization_slug: str, integration_id: str
    ) -> tuple[OrganizationIntegration, Response]:
        """Fetch one integration."""
        payload, response = self._send("GET", self._path(organization_slug, integration_id))
        return OrganizationIntegration.from_dict(payload), response

    def update_config(
        self, organization_slug: str, integration_id: str, params: Mapping[str, Any]
    ) -> Response:
        """Replace the integration-specific configuration data."""
        _, response = self._send("POST", self._path(organization_slug, integration_id), params)
        return response