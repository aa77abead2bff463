# sentrykit

A small, synchronous client for the Sentry web API. It is built on `requests`.

It covers these parts of the API:

- organizations, with their members, integrations and repositories
- teams
- projects, with their client keys, ownership rules, plugins and inbound filters
- release deployments
- PagerDuty integrations

Every endpoint method returns typed dataclasses together with a `Response`.
Errors from the API are raised as exceptions.

## Installation

```
pip install sentrykit
```

## Getting started

```python
from sentrykit.client import new_client, new_on_premise_client
from sentrykit.transport import ListCursorParams

client = new_client()  # talks to https://sentry.io/api/
client.transport.session.headers["Authorization"] = "Bearer token"

orgs, response = client.organizations.list(ListCursorParams())
for org in orgs:
    print(org.slug, org.name)

# The cursor for the next page, or "" when there are no more results.
next_page = ListCursorParams(cursor=response.cursor)
```

For a self-hosted installation, pass the base URL. The path is completed so
that it ends in `/api/`:

```python
client = new_on_premise_client("https://sentry.example.com", None)
print(client.base_url)  # https://sentry.example.com/api/
```

Both functions take an optional `requests.Session`. If you leave it out, a new
session is created. Requests are sent with the user agent `sentrykit`, which
you can change through `client.user_agent`.

## Services

A `Client` exposes one service for each area of the API. All services share
the same `Transport`.

| Attribute | Methods |
| --- | --- |
| `organizations` | `list`, `get`, `create`, `update`, `delete` |
| `organization_members` | `list`, `get`, `create`, `update`, `delete` |
| `organization_integrations` | `list`, `get`, `update_config` |
| `organization_repositories` | `list`, `create`, `delete` |
| `teams` | `list`, `get`, `create`, `update`, `delete` |
| `projects` | `list`, `get`, `create`, `update`, `delete`, `add_team`, `remove_team` |
| `project_keys` | `list`, `create`, `update`, `delete` |
| `project_ownerships` | `get`, `update` |
| `project_plugins` | `list`, `get`, `update`, `enable`, `disable` |
| `project_filter` | `get`, `get_filter_config`, `update_browser_extensions`, `update_legacy_browser` |
| `release_deployments` | `get`, `create` |
| `pagerduty` | `get` |

Create and update calls take parameter dataclasses, such as
`CreateTeamParams`, `UpdateProjectParams` or `CreateOrganizationMemberParams`.
Fields you leave unset are not sent. The exceptions are endpoints whose fields
vary, for example repository creation and plugin updates. Those take a plain
mapping.

`release_deployments.get` looks for a deploy by ID. It pages through the deploy
list and returns `None` if the deploy is not there.

## Errors and rate limits

A response outside the 2xx range raises `sentrykit.transport.ErrorResponse`.
Its `detail` attribute holds the API's message, which is either the `detail`
field of a JSON body or the body text itself.

A `429 Too Many Requests` response with the remaining quota at zero raises
`sentrykit.transport.RateLimitError`. This is a subclass of `ErrorResponse`,
and it carries the parsed `Rate`. The fields of a `Rate` are:

- `limit`
- `remaining`
- `reset`
- `concurrent_limit`
- `concurrent_remaining`

Every successful call also returns a `Response`. It exposes the same `rate`
information, the pagination `cursor`, `status_code` and `headers`.

## Project filters

```python
config, _ = client.project_filter.get_filter_config("my-org", "my-project")
print(config.browser_extension, config.legacy_browsers)

client.project_filter.update_legacy_browser("my-org", "my-project", ["ie_pre_9", "ie10"])
```

## PagerDuty

```python
from sentrykit.pagerduty import service_map

integration, _ = client.pagerduty.get("my-org", 456789)
print(service_map(integration))  # {"service name": "service id", ...}
```

## What it does not do

This is a plain library. It has no command-line tool.

There is no option for credentials. To authenticate, set the `Authorization`
header on the session yourself.

Requests are not retried, and rate-limit errors are not waited out. That is up
to the caller.

Only the endpoints listed above are covered. The following are not:

- dashboards
- issue and metric alerts
- code mappings

## Running the tests

```
pip install -e ".[test]"
pytest
```