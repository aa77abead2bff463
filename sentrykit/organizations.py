"""Sentry organizations: records and the organizations API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, Transport, add_query, parse_time
from .users import Avatar


def _optional_list(value: list[Any] | None) -> list[Any] | None:
    return None if value is None else list(value)


@dataclass
class OrganizationStatus:
    """An organization's status."""

    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrganizationStatus:
        return cls(id=data.get("id"), name=data.get("name"))


@dataclass
class OrganizationQuota:
    """An organization's quota."""

    max_rate: int | None = None
    max_rate_interval: int | None = None
    account_limit: int | None = None
    project_limit: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrganizationQuota:
        return cls(
            max_rate=data.get("maxRate"),
            max_rate_interval=data.get("maxRateInterval"),
            account_limit=data.get("accountLimit"),
            project_limit=data.get("projectLimit"),
        )


@dataclass
class OrganizationAvailableRole:
    """A role that members of the organization may be given."""

    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OrganizationAvailableRole:
        return cls(id=data.get("id"), name=data.get("name"))


_SCALAR_FIELDS = {
    "id": "id",
    "slug": "slug",
    "name": "name",
    "is_early_adopter": "isEarlyAdopter",
    "require_2fa": "require2FA",
    "require_email_verification": "requireEmailVerification",
    "is_default": "isDefault",
    "default_role": "defaultRole",
    "open_membership": "openMembership",
    "allow_shared_issues": "allowSharedIssues",
    "enhanced_privacy": "enhancedPrivacy",
    "data_scrubber": "dataScrubber",
    "data_scrubber_defaults": "dataScrubberDefaults",
    "store_crash_reports": "storeCrashReports",
    "attachments_role": "attachmentsRole",
    "debug_files_role": "debugFilesRole",
    "events_member_admin": "eventsMemberAdmin",
    "alerts_member_write": "alertsMemberWrite",
    "scrub_ip_addresses": "scrubIPAddresses",
    "scrape_javascript": "scrapeJavaScript",
    "allow_join_requests": "allowJoinRequests",
    "relay_pii_config": "relayPiiConfig",
    "role": "role",
    "pending_access_requests": "pendingAccessRequests",
}

_LIST_FIELDS = {
    "features": "features",
    "sensitive_fields": "sensitiveFields",
    "safe_fields": "safeFields",
    "access": "access",
}


@dataclass
class Organization:
    """Detailed information about a Sentry organization; absent fields are None."""

    id: str | None = None
    slug: str | None = None
    status: OrganizationStatus | None = None
    name: str | None = None
    date_created: datetime | None = None
    is_early_adopter: bool | None = None
    require_2fa: bool | None = None
    require_email_verification: bool | None = None
    avatar: Avatar | None = None
    features: list[str] | None = None

    quota: OrganizationQuota | None = None
    is_default: bool | None = None
    default_role: str | None = None
    available_roles: list[OrganizationAvailableRole] | None = None
    open_membership: bool | None = None
    allow_shared_issues: bool | None = None
    enhanced_privacy: bool | None = None
    data_scrubber: bool | None = None
    data_scrubber_defaults: bool | None = None
    sensitive_fields: list[str] | None = None
    safe_fields: list[str] | None = None
    store_crash_reports: int | None = None
    attachments_role: str | None = None
    debug_files_role: str | None = None
    events_member_admin: bool | None = None
    alerts_member_write: bool | None = None
    scrub_ip_addresses: bool | None = None
    scrape_javascript: bool | None = None
    allow_join_requests: bool | None = None
    relay_pii_config: str | None = None
    access: list[str] | None = None
    role: str | None = None
    pending_access_requests: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Organization:
        if not data:
            return cls()
        values: dict[str, Any] = {attr: data.get(key) for attr, key in _SCALAR_FIELDS.items()}
        values.update(
            {attr: _optional_list(data.get(key)) for attr, key in _LIST_FIELDS.items()}
        )
        status = data.get("status")
        quota = data.get("quota")
        avatar = data.get("avatar")
        roles = data.get("availableRoles")
        return cls(
            **values,
            status=None if status is None else OrganizationStatus.from_dict(status),
            date_created=parse_time(data.get("dateCreated")),
            avatar=None if avatar is None else Avatar.from_dict(avatar),
            quota=None if quota is None else OrganizationQuota.from_dict(quota),
            available_roles=(
                None if roles is None else [OrganizationAvailableRole.from_dict(r) for r in roles]
            ),
        )


@dataclass
class CreateOrganizationParams:
    """Parameters for creating an organization."""

    name: str | None = field(default=None, metadata={"json": "name", "omitnone": True})
    slug: str | None = field(default=None, metadata={"json": "slug", "omitnone": True})
    agree_terms: bool | None = field(
        default=None, metadata={"json": "agreeTerms", "omitnone": True}
    )


@dataclass
class UpdateOrganizationParams:
    """Parameters for updating an organization."""

    name: str | None = field(default=None, metadata={"json": "name", "omitnone": True})
    slug: str | None = field(default=None, metadata={"json": "slug", "omitnone": True})


class OrganizationsService:
    """Access to the organization API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def list(
        self, params: ListCursorParams | None = None
    ) -> tuple[list[Organization], Response]:
        """List organizations available to the authenticated session."""
        payload, response = self._send("GET", add_query("0/organizations/", params))
        return [Organization.from_dict(item) for item in payload or []], response

    def get(self, slug: str) -> tuple[Organization, Response]:
        """Fetch one organization."""
        payload, response = self._send("GET", f"0/organizations/{slug}/")
        return Organization.from_dict(payload), response

    def create(self, params: CreateOrganizationParams) -> tuple[Organization, Response]:
        """Create a new organization."""
        payload, response = self._send("POST", "0/organizations/", params)
        return Organization.from_dict(payload), response

    def update(
        self, slug: str, params: UpdateOrganizationParams
    ) -> tuple[Organization, Response]:
        """Update an organization's name or slug."""
        payload, response = self._send("PUT", f"0/organizations/{slug}/", params)
        return Organization.from_dict(payload), response

    def delete(self, slug: str) -> Response:
        """Delete an organization."""
        _, response = self._send("DELETE", f"0/organizations/{slug}/")
        return response