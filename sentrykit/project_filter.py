"""Inbound data filters of a project and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .transport import Response, Transport


@dataclass
class ProjectFilter:
    """An inbound filter; ``active`` is the filter's decoded JSON state."""

    id: str = ""
    active: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectFilter:
        if not data:
            return cls()
        return cls(id=data.get("id") or "", active=data.get("active"))


@dataclass
class FilterConfig:
    """The browser-extension and legacy-browser filter settings."""

    browser_extension: bool = False
    legacy_browsers: list[str] | None = None


def _string_list(value: Any) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"legacy browser filter is not a list of strings: {value!r}")
    return list(value)


class ProjectFilterService:
    """Access to the project filter API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    def get(
        self, organization_slug: str, project_slug: str
    ) -> tuple[list[ProjectFilter], Response]:
        """Fetch all filters of a project."""
        payload, response = self._send(
            "GET", f"0/projects/{organization_slug}/{project_slug}/filters/"
        )
        return [ProjectFilter.from_dict(item) for item in payload or []], response

    def get_filter_config(
        self, organization_slug: str, project_slug: str
    ) -> tuple[FilterConfig, Response]:
        """Summarise the browser-extension and legacy-browser filters."""
        filters, response = self.get(organization_slug, project_slug)
        config = FilterConfig()
        for project_filter in filters:
            if project_filter.id == "browser-extensions":
                if project_filter.active is True:
                    config.browser_extension = True
            elif project_filter.id == "legacy-browsers":
                if project_filter.active is not False:
                    config.legacy_browsers = _string_list(project_filter.active)
        return config, response

    def update_browser_extensions(
        self, organization_slug: str, project_slug: str, active: bool
    ) -> Response:
        """Switch the browser-extension filter on or off."""
        _, response = self._send(
            "PUT",
            f"0/projects/{organization_slug}/{project_slug}/filters/browser-extensions/",
            {"active": active},
        )
        return response

    def update_legacy_browser(
        self, organization_slug: str, project_slug: str, browsers: list[str]
    ) -> Response:
        """Set which legacy browsers are filtered."""
        _, response = self._send(
            "PUT",
            f"0/projects/{organization_slug}/{project_slug}/filters/legacy-browsers/",
            {"subfilters": list(browsers)},
        )
        return response