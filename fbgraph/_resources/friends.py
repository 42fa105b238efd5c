"""Friends resource — friend list management."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._types import Reference

if TYPE_CHECKING:
    from .._http import HTTPClient


class Friends:
    """client.friends — create, populate and delete friend lists."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_friend_lists(self, user_id: str = "me") -> list[Reference]:
        body = self._http.get_json(f"{user_id}/friendlists")
        return [Reference.from_dict(d) for d in body.get("data", [])]

    def create_friend_list(self, name: str, user_id: str = "me") -> str:
        """Create a friend list and return its id."""
        body = self._http.post_json(f"{user_id}/friendlists", data={"name": name})
        return str(body["id"])

    def delete_friend_list(self, list_id: str) -> None:
        """Delete a friend list. Only its owner may do so."""
        # The Graph API tunnels deletes through POST for this endpoint.
        self._http.post(list_id, data={"method": "delete"})

    def add_to_friend_list(self, list_id: str, friend_id: str) -> None:
        self._http.post(f"{list_id}/members/{friend_id}")

    def remove_from_friend_list(self, list_id: str, friend_id: str) -> None:
        self._http.request("DELETE", f"{list_id}/members/{friend_id}")
