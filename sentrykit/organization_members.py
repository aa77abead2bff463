"""Organization memberships and the members API endpoints."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .transport import ListCursorParams, Response, add_query, parse_time
from .users import User, _decode_record, _Endpoint, _field


class MemberRole(str, enum.Enum):
    """Roles a member can hold in an organization."""

    MEMBER = "member"
    BILLING = "billing"
    ADMIN = "admin"
    OWNER = "owner"
    MANAGER = "manager"


@dataclass
class OrganizationMember:
    """A user's membership in an organization."""

    id: str = ""
    email: str = ""
    name: str = ""
    user: User = _field(decode=User.from_dict, default_factory=User)
    role: str = ""
    role_name: str = ""
    pending: bool = False
    expired: bool = False
    flags: dict[str, bool] | None = _field(decode=dict, default=None)
    date_created: datetime | None = _field(decode=parse_time, default=None)
    invite_status: str = ""
    inviter_name: str | None = None
    teams: list[str] | None = _field(decode=list, default=None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> OrganizationMember:
        return _decode_record(cls, data)


@dataclass
class CreateOrganizationMemberParams:
    """Parameters for inviting a member."""

    email: str = ""
    role: MemberRole | str = MemberRole.MEMBER
    teams: list[str] | None = field(default=None, metadata={"omitempty": True})


@dataclass
class UpdateOrganizationMemberParams:
    """Parameters for changing a member's role or teams."""

    role: MemberRole | str = MemberRole.MEMBER
    teams: list[str] | None = field(default=None, metadata={"omitempty": True})


class OrganizationMembersService(_Endpoint):
    """Access to the organization membership API endpoints."""

    @staticmethod
    def _path(organization_slug: str, member_id: str | None = None) -> str:
        base = f"0/organizations/{organization_slug}/members/"
        return base if member_id is None else f"{base}{member_id}/"

    def list(
        self, organization_slug: str, params: ListCursorParams | None = None
    ) -> tuple[list[OrganizationMember], Response]:
        """List members of an organization."""
        payload, response = self._send("GET", add_query(self._path(organization_slug), params))
        return [OrganizationMember.from_dict(item) for item in payload or []], response

    def get(self, organization_slug: str, member_id: str) -> tuple[OrganizationMember, Response]:
        """Fetch one member."""
        payload, response = self._send("GET", self._path(organization_slug, member_id))
        return OrganizationMember.from_dict(payload), response

    def create(
        self, organization_slug: str, params: CreateOrganizationMemberParams
    ) -> tuple[OrganizationMember, Response]:
        """Invite a new member."""
        payload, response = self._send("POST", self._path(organization_slug), params)
        return OrganizationMember.from_dict(payload), response

    def update(
        self, organization_slug: str, member_id: str, params: UpdateOrganizationMemberParams
    ) -> tuple[OrganizationMember, Response]:
        """Change a member's role or teams."""
        payload, response = self._send("PUT", self._path(organization_slug, member_id), params)
        return OrganizationMember.from_dict(payload), response

    def delete(self, organization_slug: str, member_id: str) -> Response:
        """Remove a member from the organization."""
        _, response = self._send("DELETE", self._path(organization_slug, member_id))
        return response