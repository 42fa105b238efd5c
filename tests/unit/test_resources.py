"""Tests for resource namespaces — verify correct Graph calls and response parsing."""

import pytest
import responses

from fbgraph._http import HTTPClient
from fbgraph._resources import Events, Friends, Users
from fbgraph._types import FacebookProfile, Reference

GRAPH = "https://graph.facebook.com"


@pytest.fixture
def http():
    return HTTPClient(base_url=GRAPH, access_token="someAccessToken", timeout=5)


# ── Events ───────────────────────────────────────────────────────────


class TestEvents:
    @pytest.mark.parametrize(
        ("method_name", "status"),
        [
            ("accept_invitation", "attending"),
            ("maybe_invitation", "maybe"),
            ("decline_invitation", "declined"),
        ],
    )
    @responses.activate
    def test_rsvp(self, http, method_name, status):
        responses.add(responses.POST, f"{GRAPH}/193482154020832/{status}", body="true", status=200)
        assert getattr(Events(http), method_name)("193482154020832") is None
        assert responses.calls[0].request.method == "POST"


# ── Friends ──────────────────────────────────────────────────────────


class TestFriends:
    @responses.activate
    def test_get_friend_lists(self, http):
        responses.add(
            responses.GET,
            f"{GRAPH}/me/friendlists",
            json={"data": [{"id": "1", "name": "Work"}, {"id": "2", "name": "Family"}]},
            status=200,
        )
        lists = Friends(http).get_friend_lists()
        assert lists == [Reference(id="1", name="Work"), Reference(id="2", name="Family")]

    @responses.activate
    def test_get_friend_lists_empty(self, http):
        responses.add(responses.GET, f"{GRAPH}/42/friendlists", json={}, status=200)
        assert Friends(http).get_friend_lists("42") == []

    @responses.activate
    def test_create_friend_list(self, http):
        responses.add(responses.POST, f"{GRAPH}/me/friendlists", json={"id": "9988"}, status=200)
        assert Friends(http).create_friend_list("Bowling") == "9988"
        assert responses.calls[0].request.body == "name=Bowling"

    @responses.activate
    def test_delete_friend_list_tunnels_through_post(self, http):
        responses.add(responses.POST, f"{GRAPH}/1234567890", body="true", status=200)
        Friends(http).delete_friend_list("1234567890")
        assert responses.calls[0].request.body == "method=delete"

    @responses.activate
    def test_add_to_friend_list(self, http):
        responses.add(
            responses.POST, f"{GRAPH}/119297590579/members/100001387295207", body="true"
        )
        Friends(http).add_to_friend_list("119297590579", "100001387295207")
        assert len(responses.calls) == 1

    @responses.activate
    def test_remove_from_friend_list(self, http):
        responses.add(
            responses.DELETE, f"{GRAPH}/119297590579/members/100001387295207", body="true"
        )
        Friends(http).remove_from_friend_list("119297590579", "100001387295207")
        assert responses.calls[0].request.method == "DELETE"


# ── Users ────────────────────────────────────────────────────────────


class TestUsers:
    @responses.activate
    def test_get_user_profile(self, http, load_fixture):
        responses.add(
            responses.GET,
            f"{GRAPH}/me",
            body=load_fixture("profile.json"),
            status=200,
            content_type="application/json",
        )
        profile = Users(http).get_user_profile()
        assert isinstance(profile, FacebookProfile)
        assert profile.id == "123456789"
        assert profile.username == "habuma"
        assert profile.email is None
        assert profile.extra == {"timezone": -6}

    @responses.activate
    def test_get_user_profile_image(self, http):
        jpeg = b"\xff\xd8\xff\xe0\x00\x10JFIF"
        responses.add(
            responses.GET,
            f"{GRAPH}/123456/picture?type=large",
            body=jpeg,
            status=200,
            content_type="image/jpeg",
        )
        assert Users(http).get_user_profile_image("123456", image_type="large") == jpeg

    def test_get_user_profile_image_rejects_unknown_type(self, http):
        with pytest.raises(ValueError):
            Users(http).get_user_profile_image("123456", image_type="huge")
