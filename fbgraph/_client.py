"""Facebook Graph API client."""

from __future__ import annotations

import os
from typing import Any

from ._http import HTTPClient
from ._resources import Events, Friends, Users
from ._types import FacebookProfile

DEFAULT_BASE_URL = "https://graph.facebook.com"


class Facebook:
    """Client for the Facebook Graph API.

    Usage:
        facebook = Facebook(access_token="...")
        profile = facebook.users.get_user_profile()
        facebook.events.decline_invitation("193482154020832")

    Without an access token (argument or ``FACEBOOK_ACCESS_TOKEN``) the client
    is anonymous and can only read public objects.
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        timeout: int = 30,
        max_retries: int = 3,
    ):
        access_token = access_token or os.environ.get("FACEBOOK_ACCESS_TOKEN")
        base_url = base_url or os.environ.get("FACEBOOK_GRAPH_URL") or DEFAULT_BASE_URL

        self._http = HTTPClient(
            base_url=base_url,
            access_token=access_token,
            timeout=timeout,
            max_retries=max_retries,
        )
        self.users = Users(self._http)
        self.events = Events(self._http)
        self.friends = Friends(self._http)

    @property
    def is_authorized(self) -> bool:
        return self._http.authorized

    def fetch_object(self, object_id: str, fields: list[str] | None = None) -> dict[str, Any]:
        params = {"fields": ",".join(fields)} if fields else {}
        return self._http.get_json(object_id, **params)

    def fetch_profile(self, object_id: str) -> FacebookProfile:
        return FacebookProfile.from_dict(self.fetch_object(object_id))

    def fetch_connections(
        self, object_id: str, connection: str, **params: Any
    ) -> list[dict[str, Any]]:
        """Fetch ``/{object_id}/{connection}`` and unwrap the ``data`` list."""
        body = self._http.get_json(f"{object_id}/{connection}", **params)
        return body.get("data", []) if isinstance(body, dict) else body

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Facebook:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
