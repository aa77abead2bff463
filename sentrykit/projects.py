"""Sentry projects: records and the project API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .organizations import Organization
from .teams import Team
from .transport import Response, Transport, parse_time
from .users import Avatar


def _optional_list(value: Any) -> list[Any] | None:
    return None if value is None else list(value)


@dataclass
class Project:
    """A Sentry project."""

    id: str = ""
    slug: str = ""
    name: str = ""

    is_public: bool = False
    is_bookmarked: bool = False
    color: str = ""

    date_created: datetime | None = None
    first_event: datetime | None = None

    features: list[str] | None = None
    status: str = ""
    platform: str = ""

    is_internal: bool = False
    is_member: bool = False
    has_access: bool = False

    avatar: Avatar = field(default_factory=Avatar)

    options: dict[str, Any] | None = None

    digests_min_delay: int = 0
    digests_max_delay: int = 0
    subject_prefix: str = ""
    allowed_domains: list[str] | None = None
    resolve_age: int = 0
    data_scrubber: bool = False
    data_scrubber_defaults: bool = False
    fingerprinting_rules: str = ""
    grouping_enhancements: str = ""
    safe_fields: list[str] | None = None
    sensitive_fields: list[str] | None = None
    subject_template: str = ""
    security_token: str = ""
    security_token_header: str | None = None
    verify_ssl: bool = False
    scrub_ip_addresses: bool = False
    scrape_javascript: bool = False

    organization: Organization = field(default_factory=Organization)
    processing_issues: int = 0

    team: Team = field(default_factory=Team)
    teams: list[Team] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Project:
        if not data:
            return cls()
        options = data.get("options")
        teams = data.get("teams")
        return cls(
            id=data.get("id") or "",
            slug=data.get("slug") or "",
            name=data.get("name") or "",
            is_public=data.get("isPublic") or False,
            is_bookmarked=data.get("isBookmarked") or False,
            color=data.get("color") or "",
            date_created=parse_time(data.get("dateCreated")),
            first_event=parse_time(data.get("firstEvent")),
            features=_optional_list(data.get("features")),
            status=data.get("status") or "",
            platform=data.get("platform") or "",
            is_internal=data.get("isInternal") or False,
            is_member=data.get("isMember") or False,
            has_access=data.get("hasAccess") or False,
            avatar=Avatar.from_dict(data.get("avatar")),
            options=None if options is None else dict(options),
            digests_min_delay=data.get("digestsMinDelay") or 0,
            digests_max_delay=data.get("digestsMaxDelay") or 0,
            subject_prefix=data.get("subjectPrefix") or "",
            allowed_domains=_optional_list(data.get("allowedDomains")),
            resolve_age=data.get("resolveAge") or 0,
            data_scrubber=data.get("dataScrubber") or False,
            data_scrubber_defaults=data.get("dataScrubberDefaults") or False,
            fingerprinting_rules=data.get("fingerprintingRules") or "",
            grouping_enhancements=data.get("groupingEnhancements") or "",
            safe_fields=_optional_list(data.get("safeFields")),
            sensitive_fields=_optional_list(data.get("sensitiveFields")),
            subject_template=data.get("subjectTemplate") or "",
            security_token=data.get("securityToken") or "",
            security_token_header=data.get("securityTokenHeader"),
            verify_ssl=data.get("verifySSL") or False,
            scrub_ip_addresses=data.get("scrubIPAddresses") or False,
            scrape_javascript=data.get("scrapeJavaScript") or False,
            organization=Organization.from_dict(data.get("organization")),
            processing_issues=data.get("processingIssues") or 0,
            team=Team.from_dict(data.get("team")),
            teams=None if teams is None else [Team.from_dict(item) for item in teams],
        )


@dataclass
class ProjectSummaryTeam:
    """A team as listed in a project summary."""

    id: str = ""
    name: str = ""
    slug: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectSummaryTeam:
        if not data:
            return cls()
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            slug=data.get("slug") or "",
        )


@dataclass
class ProjectSummary:
    """The summary of a project."""

    id: str = ""
    name: str = ""
    slug: str = ""
    is_bookmarked: bool = False
    is_member: bool = False
    has_access: bool = False
    date_created: datetime | None = None
    first_event: datetime | None = None
    platform: str | None = None
    platforms: list[str] | None = None
    team: ProjectSummaryTeam | None = None
    teams: list[ProjectSummaryTeam] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectSummary:
        if not data:
            return cls()
        team = data.get("team")
        teams = data.get("teams")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            slug=data.get("slug") or "",
            is_bookmarked=data.get("isBookmarked") or False,
            is_member=data.get("isMember") or False,
            has_access=data.get("hasAccess") or False,
            date_created=parse_time(data.get("dateCreated")),
            first_event=parse_time(data.get("firstEvent")),
            platform=data.get("platform"),
            platforms=_optional_list(data.get("platforms")),
            team=None if team is None else ProjectSummaryTeam.from_dict(team),
            teams=(
                None if teams is None else [ProjectSummaryTeam.from_dict(item) for item in teams]
            ),
        )


@dataclass
class CreateProjectParams:
    """Parameters for creating a project."""

    name: str = field(default="", metadata={"omitempty": True})
    slug: str = field(default="", metadata={"omitempty": True})
    platform: str = field(default="", metadata={"omitempty": True})


@dataclass
class UpdateProjectParams:
    """Parameters for updating a project; unset fields are left out of the request."""

    name: str = field(default="", metadata={"omitempty": True})
    slug: str = field(default="", metadata={"omitempty": True})
    platform: str = field(default="", metadata={"omitempty": True})
    is_bookmarked: bool | None = field(
        default=None, metadata={"json": "isBookmarked", "omitnone": True}
    )
    digests_min_delay: int | None = field(
        default=None, metadata={"json": "digestsMinDelay", "omitnone": True}
    )
    digests_max_delay: int | None = field(
        default=None, metadata={"json": "digestsMaxDelay", "omitnone": True}
    )
    resolve_age: int | None = field(
        default=None, metadata={"json": "resolveAge", "omitnone": True}
    )
    options: dict[str, Any] | None = field(default=None, metadata={"omitempty": True})
    allowed_domains: list[str] | None = field(
        default=None, metadata={"json": "allowedDomains", "omitempty": True}
    )
    fingerprinting_rules: str = field(
        default="", metadata={"json": "fingerprintingRules", "omitempty": True}
    )
    grouping_enhancements: str = field(
        default="", metadata={"json": "groupingEnhancements", "omitempty": True}
    )


class ProjectsService:
    """Access to the project API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def list(self) -> tuple[list[Project], Response]:
        """List the projects available to the session."""
        payload, response = self._send("GET", "0/projects/")
        return [Project.from_dict(item) for item in payload or []], response

    def get(self, organization_slug: str, slug: str) -> tuple[Project, Response]:
        """Fetch one project."""
        payload, response = self._send("GET", f"0/projects/{organization_slug}/{slug}/")
        return Project.from_dict(payload), response

    def create(
        self, organization_slug: str, team_slug: str, params: CreateProjectParams
    ) -> tuple[Project, Response]:
        """Create a project bound to a team."""
        payload, response = self._send(
            "POST", f"0/teams/{organization_slug}/{team_slug}/projects/", params
        )
        return Project.from_dict(payload), response

    def update(
        self, organization_slug: str, slug: str, params: UpdateProjectParams
    ) -> tuple[Project, Response]:
        """Update a project's attributes and settings."""
        payload, response = self._send(
            "PUT", f"0/projects/{organization_slug}/{slug}/", params
        )
        return Project.from_dict(payload), response

    def delete(self, organization_slug: str, slug: str) -> Response:
        """Delete a project."""
        _, response = self._send("DELETE", f"0/projects/{organization_slug}/{slug}/")
        return response

    def add_team(
        self, organization_slug: str, slug: str, team_slug: str
    ) -> tuple[Project, Response]:
        """Give a team access to a project."""
        payload, response = self._send(
            "POST", f"0/projects/{organization_slug}/{slug}/teams/{team_slug}/"
        )
        return Project.from_dict(payload), response

    def remove_team(self, organization_slug: str, slug: str, team_slug: str) -> Response:
        """Remove a team's access to a project."""
        _, response = self._send(
            "DELETE", f"0/projects/{organization_slug}/{slug}/teams/{team_slug}/"
        )
        return response