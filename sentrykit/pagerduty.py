"""PagerDuty integrations of an organization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .transport import Response, Transport


@dataclass
class PagerdutyServiceEntry:
    """A PagerDuty service configured in the integration."""

    service: str = ""
    integration_key: str = ""
    id: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PagerdutyServiceEntry:
        if not data:
            return cls()
        return cls(
            service=data.get("service") or "",
            integration_key=data.get("integration_key") or "",
            id=data.get("id") or 0,
        )


@dataclass
class PagerdutyIntegration:
    """A PagerDuty integration and its service table."""

    id: str = ""
    name: str = ""
    service_table: list[PagerdutyServiceEntry] = field(default_factory=list)
    external_id: str = ""
    organization_id: int = 0
    organization_integration_status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PagerdutyIntegration:
        if not data:
            return cls()
        config = data.get("configData") or {}
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            service_table=[
                PagerdutyServiceEntry.from_dict(item) for item in config.get("service_table") or []
            ],
            external_id=data.get("externalId") or "",
            organization_id=data.get("organizationId") or 0,
            organization_integration_status=data.get("organizationIntegrationStatus") or "",
        )


class PagerdutyService:
    """Access to PagerDuty integration details."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, organization: str, integration_id: int) -> tuple[PagerdutyIntegration, Response]:
        """Fetch a PagerDuty integration."""
        request = self._transport.new_request(
            "GET", f"0/organizations/{organization}/integrations/{int(integration_id)}/"
        )
        payload, response = self._transport.do(request)
        return PagerdutyIntegration.from_dict(payload), response


def service_map(integration: PagerdutyIntegration) -> dict[str, str]:
    """Map each service name to its entry ID as a string."""
    return {entry.service: str(entry.id) for entry in integration.service_table}