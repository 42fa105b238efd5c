"""Dataclass models for Graph API responses and payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import requests


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class RawResponse:
    """An HTTP response as seen by the classifier: status, headers and undecoded body."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | str = b""

    @classmethod
    def from_requests(cls, resp: requests.Response) -> RawResponse:
        return cls(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.content or b"",
        )

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8", errors="replace")
        return self.body

    @property
    def is_error_status(self) -> bool:
        return self.status_code >= 400


@dataclass(frozen=True)
class GraphError:
    """Contents of the Graph API error envelope ``{"error": {...}}``."""

    type: str
    message: str
    code: int | None = None
    subcode: int | None = None

    @classmethod
    def from_envelope(cls, data: Any) -> GraphError | None:
        """Extract the error from a decoded body, or None if it is not an error envelope."""
        if not isinstance(data, dict):
            return None
        error = data.get("error")
        if error is None:
            return None
        if not isinstance(error, dict):
            # Legacy endpoints report a bare string.
            return cls(type="", message=str(error))
        message = error.get("message")
        if message is None:
            message = ""
        elif not isinstance(message, str):
            message = str(message)
        subcode = error.get("error_subcode", error.get("subcode"))
        return cls(
            type=str(error.get("type") or ""),
            message=message,
            code=_as_int(error.get("code")),
            subcode=_as_int(subcode),
        )


@dataclass
class Reference:
    """A lightweight ``{"id", "name"}`` pointer to another Graph object."""

    id: str
    name: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Reference:
        return cls(id=str(data["id"]), name=data.get("name"))


@dataclass
class FacebookProfile:
    """A user profile as returned by ``GET /{user-id}``."""

    id: str
    name: str | None
    first_name: str | None
    last_name: str | None
    username: str | None
    email: str | None
    gender: str | None
    locale: str | None
    link: str | None
    extra: dict = field(default_factory=dict)

    _KNOWN = (
        "id",
        "name",
        "first_name",
        "last_name",
        "username",
        "email",
        "gender",
        "locale",
        "link",
    )

    @classmethod
    def from_dict(cls, data: dict) -> FacebookProfile:
        return cls(
            id=str(data["id"]),
            name=data.get("name"),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            username=data.get("username"),
            email=data.get("email"),
            gender=data.get("gender"),
            locale=data.get("locale"),
            link=data.get("link"),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )
