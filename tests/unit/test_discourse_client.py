"""Tests for the Discourse HTTP client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from backend.domains.discourse.client import DiscourseClient
from shared.errors import ForumRequestError


def make_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def make_client(response=None, error=None, **kwargs):
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return DiscourseClient("secret-key", "system", session=session, **kwargs), session


class TestGetUserProfile:
    """Successful lookups."""

    def test_returns_user_object(self):
        client, session = make_client(make_response(payload={"user": {"id": 1, "username": "alice"}}))
        assert client.get_user_profile("https://forum.example.com", "alice") == {"id": 1, "username": "alice"}

    def test_sends_credentials_and_timeout(self):
        client, session = make_client(make_response(payload={"user": {}}), timeout=3.5)
        client.get_user_profile("https://forum.example.com/", "alice")

        args, kwargs = session.get.call_args
        assert args[0] == "https://forum.example.com/u/alice.json"
        assert kwargs["headers"]["Api-Key"] == "secret-key"
        assert kwargs["headers"]["Api-Username"] == "system"
        assert kwargs["timeout"] == 3.5

    def test_username_is_url_quoted(self):
        client, session = make_client(make_response(payload={"user": {}}))
        client.get_user_profile("https://forum.example.com", "a b/c")
        assert session.get.call_args[0][0] == "https://forum.example.com/u/a%20b%2Fc.json"

    def test_without_session_uses_module_level_get(self):
        client = DiscourseClient("secret-key", timeout=2.0)
        assert client.session is None

        with patch("backend.domains.discourse.client.requests.get") as mock_get:
            mock_get.return_value = make_response(payload={"user": {"id": 3}})
            assert client.get_user_profile("https://forum.example.com", "bob") == {"id": 3}

        mock_get.assert_called_once()
        assert mock_get.call_args[0][0] == "https://forum.example.com/u/bob.json"
        assert mock_get.call_args[1]["timeout"] == 2.0

    def test_no_api_key_header_without_key(self):
        client = DiscourseClient(None)
        assert "Api-Key" not in client.headers
        assert client.headers["Api-Username"] == "system"


class TestFailures:
    """Every failure mode surfaces as ForumRequestError."""

    def test_transport_error(self):
        client, _ = make_client(error=requests.exceptions.ConnectionError("refused"))
        with pytest.raises(ForumRequestError) as exc_info:
            client.get_user_profile("https://forum.example.com", "alice")
        assert exc_info.value.url == "https://forum.example.com/u/alice.json"
        assert exc_info.value.status_code is None

    def test_timeout(self):
        client, _ = make_client(error=requests.exceptions.Timeout("slow"))
        with pytest.raises(ForumRequestError):
            client.get_user_profile("https://forum.example.com", "alice")

    def test_non_2xx(self):
        client, _ = make_client(make_response(status_code=404, text="not found"))
        with pytest.raises(ForumRequestError) as exc_info:
            client.get_user_profile("https://forum.example.com", "ghost")
        assert exc_info.value.status_code == 404
        assert exc_info.value.api_response == "not found"
        assert str(exc_info.value).startswith("[404]")

    def test_invalid_json(self):
        client, _ = make_client(make_response(payload=ValueError("bad json"), text="<html>"))
        with pytest.raises(ForumRequestError):
            client.get_user_profile("https://forum.example.com", "alice")

    def test_missing_user_key(self):
        client, _ = make_client(make_response(payload={"errors": ["nope"]}))
        with pytest.raises(ForumRequestError):
            client.get_user_profile("https://forum.example.com", "alice")
