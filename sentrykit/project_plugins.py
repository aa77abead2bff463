"""Plugins bound to a project and their API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .transport import Response, Transport


@dataclass
class ProjectPluginAsset:
    """An asset shipped with a plugin."""

    url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectPluginAsset:
        if not data:
            return cls()
        return cls(url=data.get("url") or "")


@dataclass
class ProjectPluginConfig:
    """One configuration field of a plugin."""

    name: str = ""
    label: str = ""
    type: str = ""
    required: bool = False
    help: str = ""
    placeholder: str = ""
    choices: Any = None
    read_only: bool = False
    default_value: Any = None
    value: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectPluginConfig:
        if not data:
            return cls()
        return cls(
            name=data.get("name") or "",
            label=data.get("label") or "",
            type=data.get("type") or "",
            required=data.get("required") or False,
            help=data.get("help") or "",
            placeholder=data.get("placeholder") or "",
            choices=data.get("choices"),
            read_only=data.get("readonly") or False,
            default_value=data.get("defaultValue"),
            value=data.get("value"),
        )


@dataclass
class ProjectPlugin:
    """A plugin bound to a project."""

    id: str = ""
    name: str = ""
    type: str = ""
    can_disable: bool = False
    is_testable: bool = False
    metadata: dict[str, Any] | None = None
    contexts: list[str] | None = None
    status: str = ""
    assets: list[ProjectPluginAsset] | None = None
    doc: str = ""
    config: list[ProjectPluginConfig] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ProjectPlugin:
        if not data:
            return cls()
        metadata = data.get("metadata")
        contexts = data.get("contexts")
        assets = data.get("assets")
        config = data.get("config")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            type=data.get("type") or "",
            can_disable=data.get("canDisable") or False,
            is_testable=data.get("isTestable") or False,
            metadata=None if metadata is None else dict(metadata),
            contexts=None if contexts is None else list(contexts),
            status=data.get("status") or "",
            assets=None if assets is None else [ProjectPluginAsset.from_dict(a) for a in assets],
            doc=data.get("doc") or "",
            config=None if config is None else [ProjectPluginConfig.from_dict(c) for c in config],
        )


class ProjectPluginsService:
    """Access to the project plugin API endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)

    @staticmethod
    def _path(organization_slug: str, project_slug: str, plugin_id: str) -> str:
        return f"0/projects/{organization_slug}/{project_slug}/plugins/{plugin_id}/"

    def list(
        self, organization_slug: str, project_slug: str
    ) -> tuple[list[ProjectPlugin], Response]:
        """List plugins bound to a project."""
        payload, response = self._send(
            "GET", f"0/projects/{organization_slug}/{project_slug}/plugins/"
        )
        return [ProjectPlugin.from_dict(item) for item in payload or []], response

    def get(
        self, organization_slug: str, project_slug: str, plugin_id: str
    ) -> tuple[ProjectPlugin, Response]:
        """Fetch the details of one plugin."""
        payload, response = self._send(
            "GET", self._path(organization_slug, project_slug, plugin_id)
        )
        return ProjectPlugin.from_dict(payload), response

    def update(
        self,
        organization_slug: str,
        project_slug: str,
        plugin_id: str,
        params: Mapping[str, Any],
    ) -> tuple[ProjectPlugin, Response]:
        """Change a plugin's settings."""
        payload, response = self._send(
            "PUT", self._path(organization_slug, project_slug, plugin_id), params
        )
        return ProjectPlugin.from_dict(payload), response

    def enable(self, organization_slug: str, project_slug: str, plugin_id: str) -> Response:
        """Enable a plugin for the project."""
        _, response = self._send("POST", self._path(organization_slug, project_slug, plugin_id))
        return response

    def disable(self, organization_slug: str, project_slug: str, plugin_id: str) -> Response:
        """Disable a plugin for the project."""
        _, response = self._send(
            "DELETE", self._path(organization_slug, project_slug, plugin_id)
        )
        return response