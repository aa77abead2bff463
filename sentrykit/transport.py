"""HTTP plumbing shared by the API services: requests, responses, errors and rate limits."""

from __future__ import annotations

import dataclasses
import enum
import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

import requests
from requests.structures import CaseInsensitiveDict
from requests.utils import parse_header_links

DEFAULT_BASE_URL = "https://sentry.io/api/"
USER_AGENT = "sentrykit"

HEADER_RATE_LIMIT = "X-Sentry-Rate-Limit-Limit"
HEADER_RATE_REMAINING = "X-Sentry-Rate-Limit-Remaining"
HEADER_RATE_RESET = "X-Sentry-Rate-Limit-Reset"
HEADER_RATE_CONCURRENT_LIMIT = "X-Sentry-Rate-Limit-ConcurrentLimit"
HEADER_RATE_CONCURRENT_REMAINING = "X-Sentry-Rate-Limit-ConcurrentRemaining"

_TOO_MANY_REQUESTS = 429

_RFC3339 = re.compile(
    r"^(\d{4}-\d\d-\d\d)[Tt](\d\d:\d\d:\d\d)(?:\.(\d+))?([Zz]|[+-]\d\d:\d\d)$"
)


def parse_time(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware datetime; ``None`` stays ``None``."""
    if value is None:
        return None
    match = _RFC3339.match(value)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {value!r}")
    date, clock, fraction, zone = match.groups()
    micros = (fraction or "")[:6].ljust(6, "0")
    offset = "+00:00" if zone in ("Z", "z") else zone
    return datetime.fromisoformat(f"{date}T{clock}.{micros}{offset}")


def _format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


@dataclass
class Rate:
    """Rate limit state reported by the API for the current caller."""

    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None
    concurrent_limit: int = 0
    concurrent_remaining: int = 0


def _atoi(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def parse_rate(headers: Mapping[str, str] | None) -> Rate:
    """Read the rate limit headers; unparsable values count as zero."""
    headers = CaseInsensitiveDict(headers or {})
    rate = Rate()
    if limit := headers.get(HEADER_RATE_LIMIT):
        rate.limit = _atoi(limit)
    if remaining := headers.get(HEADER_RATE_REMAINING):
        rate.remaining = _atoi(remaining)
    if reset := headers.get(HEADER_RATE_RESET):
        seconds = _atoi(reset)
        if seconds:
            try:
                rate.reset = datetime.fromtimestamp(seconds, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                rate.reset = None
    if concurrent_limit := headers.get(HEADER_RATE_CONCURRENT_LIMIT):
        rate.concurrent_limit = _atoi(concurrent_limit)
    if concurrent_remaining := headers.get(HEADER_RATE_CONCURRENT_REMAINING):
        rate.concurrent_remaining = _atoi(concurrent_remaining)
    return rate


@dataclass
class Response:
    """An API response with its pagination cursor and rate limit state."""

    http_response: requests.Response
    cursor: str = ""
    rate: Rate = field(default_factory=Rate)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.http_response.headers

    @property
    def content_length(self) -> int:
        return len(self.http_response.content or b"")


def _next_cursor(link_header: str) -> str:
    if not link_header:
        return ""
    links = {link.get("rel"): link for link in parse_header_links(link_header)}
    next_link = links.get("next")
    if next_link is not None and next_link.get("results") == "true":
        return next_link.get("cursor", "")
    return ""


def new_response(http_response: requests.Response) -> Response:
    """Wrap an HTTP response, reading its rate limits and next-page cursor."""
    return Response(
        http_response=http_response,
        cursor=_next_cursor(http_response.headers.get("Link", "")),
        rate=parse_rate(http_response.headers),
    )


def _status_of(response: requests.Response | None) -> int | None:
    return None if response is None else response.status_code


def _same_status(first: requests.Response | None, second: requests.Response | None) -> bool:
    if first is None and second is None:
        return True
    if first is not None and second is not None:
        return first.status_code == second.status_code
    return False


class ErrorResponse(Exception):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, response: requests.Response, detail: str = "") -> None:
        super().__init__(response, detail)
        self.response = response
        self.detail = detail

    def __str__(self) -> str:
        request = getattr(self.response, "request", None)
        method = getattr(request, "method", "") or ""
        url = getattr(request, "url", "") or ""
        return f"{method} {url}: {_status_of(self.response)} {self.detail}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.detail == other.detail and _same_status(self.response, other.response)

    def __hash__(self) -> int:
        return hash((type(self), self.detail, _status_of(self.response)))


class RateLimitError(ErrorResponse):
    """The API refused the request because a rate limit was exhausted."""

    def __init__(
        self, response: requests.Response, detail: str = "", rate: Rate | None = None
    ) -> None:
        super().__init__(response, detail)
        self.rate = rate if rate is not None else Rate()

    def __str__(self) -> str:
        if self.rate.reset is None:
            until = "unknown"
        else:
            until = str(self.rate.reset - datetime.now(timezone.utc))
        return f"{super().__str__()} [rate reset in {until}]"

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self.rate == other.rate

    __hash__ = ErrorResponse.__hash__


def _error_detail(data: bytes) -> str:
    text = data.decode("utf-8", errors="replace")
    try:
        parsed = json.loads(text)
    except ValueError:
        parsed = None
    if isinstance(parsed, str) and parsed:
        return parsed
    if isinstance(parsed, Mapping) and parsed.get("detail"):
        return str(parsed["detail"])
    return text.strip()


def check_response(http_response: requests.Response) -> None:
    """Raise ``ErrorResponse`` or ``RateLimitError`` for a non-2xx response."""
    status = http_response.status_code
    if 200 <= status <= 299:
        return None
    detail = _error_detail(http_response.content or b"")
    headers = http_response.headers
    if status == _TOO_MANY_REQUESTS and (
        headers.get(HEADER_RATE_REMAINING) == "0"
        or headers.get(HEADER_RATE_CONCURRENT_REMAINING) == "0"
    ):
        raise RateLimitError(http_response, detail, parse_rate(headers))
    raise ErrorResponse(http_response, detail)


@dataclass
class ListCursorParams:
    """Cursor for paginated list endpoints, as given in the Link header."""

    cursor: str = field(default="", metadata={"query": "cursor", "omitempty": True})


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, int, float, list, tuple, dict, set, frozenset)):
        return not value
    return False


def _query_text(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return _format_time(value)
    return str(value)


def _query_pairs(params: Any) -> list[tuple[str, str]]:
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        items = []
        for spec in dataclasses.fields(params):
            name = spec.metadata.get("query", spec.name)
            if name == "-":
                continue
            value = getattr(params, spec.name)
            if spec.metadata.get("omitempty") and _is_empty(value):
                continue
            items.append((name, value))
    elif isinstance(params, Mapping):
        items = [(str(name), value) for name, value in params.items() if value is not None]
    else:
        raise TypeError(f"cannot encode {type(params).__name__} as a query string")

    pairs = []
    for name, value in items:
        if isinstance(value, (list, tuple)):
            pairs.extend((name, _query_text(item)) for item in value)
        else:
            pairs.append((name, "" if value is None else _query_text(value)))
    return pairs


def add_query(url: str, params: Any) -> str:
    """Replace the query of ``url`` with the encoded ``params``, keys sorted."""
    if params is None:
        return url
    pairs = sorted(_query_pairs(params), key=lambda pair: pair[0])
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def _to_json(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out = {}
        for spec in dataclasses.fields(value):
            name = spec.metadata.get("json", spec.name)
            if name == "-":
                continue
            item = getattr(value, spec.name)
            if spec.metadata.get("omitempty") and _is_empty(item):
                continue
            if spec.metadata.get("omitnone") and item is None:
                continue
            out[name] = _to_json(item)
        return out
    if isinstance(value, enum.Enum):
        return _to_json(value.value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, Mapping):
        return {str(key): _to_json(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


class Transport:
    """Builds and sends API requests relative to a base URL."""

    def __init__(
        self,
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.user_agent = user_agent

    def new_request(self, method: str, url_ref: str, body: Any = None) -> requests.PreparedRequest:
        """Prepare a request for ``url_ref`` resolved against the base URL."""
        if not urlsplit(self.base_url).path.endswith("/"):
            raise ValueError(
                f"base URL must have a trailing slash, but {self.base_url!r} does not"
            )
        url = urljoin(self.base_url, url_ref)

        headers = {}
        data = None
        if body is not None:
            encoded = json.dumps(_to_json(body), ensure_ascii=False, separators=(",", ":"))
            data = (encoded + "\n").encode("utf-8")
            headers["Content-Type"] = "application/json"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return self.session.prepare_request(
            requests.Request(method, url, data=data, headers=headers)
        )

    def bare_do(self, request: requests.PreparedRequest) -> Response:
        """Send the request and raise if the API reports an error."""
        http_response = self.session.send(request)
        response = new_response(http_response)
        check_response(http_response)
        return response

    def do(self, request: requests.PreparedRequest) -> tuple[Any, Response]:
        """Send the request and return the decoded JSON body (or None) with the response."""
        response = self.bare_do(request)
        content = response.http_response.content or b""
        if not content.strip():
            return None, response
        return json.loads(content), response