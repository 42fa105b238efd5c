"""Tests for the top-level Facebook client."""

import responses

from fbgraph import Facebook
from fbgraph._client import DEFAULT_BASE_URL
from fbgraph._resources import Events, Friends, Users

GRAPH = "https://graph.facebook.com"


class TestConfiguration:
    def test_resources_attached(self):
        facebook = Facebook(access_token="t")
        assert isinstance(facebook.users, Users)
        assert isinstance(facebook.events, Events)
        assert isinstance(facebook.friends, Friends)

    def test_anonymous_without_token(self):
        assert Facebook().is_authorized is False

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("FACEBOOK_ACCESS_TOKEN", "envToken")
        assert Facebook().is_authorized is True

    @responses.activate
    def test_env_token_sent_as_oauth_header(self, monkeypatch):
        monkeypatch.setenv("FACEBOOK_ACCESS_TOKEN", "envToken")
        responses.add(responses.GET, f"{DEFAULT_BASE_URL}/me", json={"id": "1"}, status=200)
        Facebook().fetch_object("me")
        assert responses.calls[0].request.headers["Authorization"] == "OAuth envToken"

    @responses.activate
    def test_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("FACEBOOK_GRAPH_URL", "https://graph.test")
        responses.add(responses.GET, "https://graph.test/me", json={"id": "1"}, status=200)
        Facebook(access_token="t").fetch_object("me")
        assert responses.calls[0].request.url == "https://graph.test/me"

    def test_context_manager_closes(self):
        with Facebook(access_token="t") as facebook:
            assert facebook.is_authorized


class TestGraphFetches:
    @responses.activate
    def test_fetch_object_with_fields(self, facebook):
        responses.add(
            responses.GET,
            f"{GRAPH}/4?fields=id%2Cname",
            json={"id": "4", "name": "Mark"},
            status=200,
        )
        assert facebook.fetch_object("4", fields=["id", "name"]) == {"id": "4", "name": "Mark"}

    @responses.activate
    def test_fetch_connections_unwraps_data(self, facebook):
        responses.add(
            responses.GET,
            f"{GRAPH}/me/friends",
            json={"data": [{"id": "1"}, {"id": "2"}], "paging": {}},
            status=200,
        )
        assert facebook.fetch_connections("me", "friends") == [{"id": "1"}, {"id": "2"}]

    @responses.activate
    def test_fetch_connections_passes_params(self, facebook):
        responses.add(responses.GET, f"{GRAPH}/me/feed?limit=5", json={"data": []}, status=200)
        assert facebook.fetch_connections("me", "feed", limit=5) == []

    @responses.activate
    def test_fetch_profile(self, facebook):
        responses.add(responses.GET, f"{GRAPH}/4", json={"id": 4, "name": "Mark"}, status=200)
        profile = facebook.fetch_profile("4")
        assert profile.id == "4"
        assert profile.name == "Mark"
