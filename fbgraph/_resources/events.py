"""Events resource — RSVP to event invitations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .._http import HTTPClient


class Events:
    """client.events — respond to invitations on behalf of the current user."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def _rsvp(self, event_id: str, status: str) -> None:
        self._http.post(f"{event_id}/{status}")

    def accept_invitation(self, event_id: str) -> None:
        self._rsvp(event_id, "attending")

    def maybe_invitation(self, event_id: str) -> None:
        self._rsvp(event_id, "maybe")

    def decline_invitation(self, event_id: str) -> None:
        """Decline an event invitation. Requires the ``rsvp_event`` permission."""
        self._rsvp(event_id, "declined")
