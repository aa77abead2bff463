"""The API client tying the endpoint services to one transport."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

import requests

from .organization_integrations import OrganizationIntegrationsService
from .organization_members import OrganizationMembersService
from .organization_repositories import OrganizationRepositoriesService
from .organizations import OrganizationsService
from .pagerduty import PagerdutyService
from .project_filter import ProjectFilterService
from .project_keys import ProjectKeysService
from .project_ownerships import ProjectOwnershipsService
from .project_plugins import ProjectPluginsService
from .projects import ProjectsService
from .release_deployments import ReleaseDeploymentsService
from .teams import TeamsService
from .transport import DEFAULT_BASE_URL, Transport


class Client:
    """A Sentry API client; every service shares the same transport."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self.organization_integrations = OrganizationIntegrationsService(transport)
        self.organization_members = OrganizationMembersService(transport)
        self.organization_repositories = OrganizationRepositoriesService(transport)
        self.organizations = OrganizationsService(transport)
        self.project_filter = ProjectFilterService(transport)
        self.project_keys = ProjectKeysService(transport)
        self.project_ownerships = ProjectOwnershipsService(transport)
        self.project_plugins = ProjectPluginsService(transport)
        self.projects = ProjectsService(transport)
        self.release_deployments = ReleaseDeploymentsService(transport)
        self.teams = TeamsService(transport)
        self.pagerduty = PagerdutyService(transport)

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.transport.base_url = value

    @property
    def user_agent(self) -> str:
        return self.transport.user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self.transport.user_agent = value


def new_client(session: requests.Session | None = None) -> Client:
    """Create a client for the hosted Sentry API."""
    return Client(Transport(session=session, base_url=DEFAULT_BASE_URL))


def new_on_premise_client(base_url: str, session: requests.Session | None = None) -> Client:
    """Create a client for a self-hosted Sentry; the path is completed to end in ``/api/``."""
    parts = urlsplit(base_url)
    path = parts.path
    if not path.endswith("/"):
        path += "/"
    if not path.endswith("/api/"):
        path += "api/"
    client = new_client(session)
    client.base_url = urlunsplit(parts._replace(path=path))
    return client