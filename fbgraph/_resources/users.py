"""Users resource — profiles and profile pictures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .._types import FacebookProfile

if TYPE_CHECKING:
    from .._http import HTTPClient

IMAGE_TYPES = ("square", "small", "normal", "large")


class Users:
    """client.users — read user profiles."""

    def __init__(self, http: HTTPClient):
        self._http = http

    def get_user_profile(self, user_id: str = "me") -> FacebookProfile:
        return FacebookProfile.from_dict(self._http.get_json(user_id))

    def get_user_profile_image(self, user_id: str = "me", image_type: str = "normal") -> bytes:
        """Fetch the raw bytes of a user's profile picture."""
        if image_type not in IMAGE_TYPES:
            raise ValueError(f"image_type must be one of {', '.join(IMAGE_TYPES)}")
        resp = self._http.request("GET", f"{user_id}/picture", params={"type": image_type})
        return resp.content
