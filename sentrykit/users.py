"""Sentry user records and the helpers that decode API records."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, TypeVar

from .transport import Response, Transport, parse_time

_R = TypeVar("_R")
_SNAKE_STEP = re.compile(r"_([a-z0-9])")


def _json_key(name: str) -> str:
    """Turn a snake_case attribute name into the camelCase key the API uses."""
    return _SNAKE_STEP.sub(lambda match: match.group(1).upper(), name)


def _field(
    *,
    json: str | None = None,
    decode: Callable[[Any], Any] | None = None,
    **kwargs: Any,
) -> Any:
    """A dataclass field that records its JSON key and decoder."""
    metadata = {"json": json, "decode": decode}
    return field(metadata=metadata, **kwargs)


def _list_of(decode: Callable[[Any], _R]) -> Callable[[Any], list[_R]]:
    """A decoder for a JSON array whose items go through ``decode``."""
    return lambda items: [decode(item) for item in items]


def _decode_record(cls: type[_R], data: Mapping[str, Any] | None) -> _R:
    """Build a dataclass from an API object; null or missing keys keep defaults."""
    values: dict[str, Any] = {}
    source = data or {}
    for spec in fields(cls):  # type: ignore[arg-type]
        raw = source.get(spec.metadata.get("json") or _json_key(spec.name))
        if raw is None:
            continue
        decode = spec.metadata.get("decode")
        values[spec.name] = decode(raw) if decode else raw
    return cls(**values)


class _Endpoint:
    """Base of the API services: sends requests through a transport."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _send(self, method: str, path: str, body: Any = None) -> tuple[Any, Response]:
        request = self._transport.new_request(method, path, body)
        return self._transport.do(request)


@dataclass
class Avatar:
    """An avatar reference."""

    uuid: str | None = _field(json="avatarUuid", default=None)
    type: str = _field(json="avatarType", default="")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Avatar:
        return _decode_record(cls, data)


@dataclass
class UserEmail:
    """A user's e-mail address and whether it is verified."""

    id: str = ""
    email: str = ""
    is_verified: bool = _field(json="is_verified", default=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> UserEmail:
        return _decode_record(cls, data)


@dataclass
class User:
    """A Sentry user."""

    id: str = ""
    name: str = ""
    username: str = ""
    email: str = ""
    avatar_url: str = ""
    is_active: bool = False
    has_password_auth: bool = False
    is_managed: bool = False
    date_joined: datetime | None = _field(decode=parse_time, default=None)
    last_login: datetime | None = _field(decode=parse_time, default=None)
    has_2fa: bool = False
    last_active: datetime | None = _field(decode=parse_time, default=None)
    is_superuser: bool = False
    is_staff: bool = False
    avatar: Avatar = _field(decode=Avatar.from_dict, default_factory=Avatar)
    emails: list[UserEmail] | None = _field(
        decode=_list_of(UserEmail.from_dict), default=None
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> User:
        return _decode_record(cls, data)