"""Tests for the shared error hierarchy."""

from backend.domains.community.exceptions import CommunityNotFoundException, MissingFieldsException
from backend.domains.discourse.exceptions import ForumMappingNotFoundException
from shared.errors import (
    ForumRequestError,
    NotFoundError,
    PlatformError,
    UpstreamError,
    ValidationError,
)


def test_taxonomy():
    assert isinstance(CommunityNotFoundException("abc"), NotFoundError)
    assert isinstance(MissingFieldsException(["name"]), ValidationError)
    assert isinstance(ForumMappingNotFoundException("u", "c"), ValidationError)
    assert isinstance(ForumRequestError("down"), UpstreamError)
    assert isinstance(ForumRequestError("down"), PlatformError)


def test_to_dict_carries_context():
    data = MissingFieldsException(["name", "creator"]).to_dict()
    assert data["error_type"] == "MissingFieldsException"
    assert data["message"] == "Missing required fields"
    assert data["context"] == {"fields": ["name", "creator"]}


def test_forum_request_error_to_dict():
    error = ForumRequestError("bad gateway", url="https://f/u/a.json", status_code=502, api_response="<html>")
    data = error.to_dict()
    assert data["url"] == "https://f/u/a.json"
    assert data["status_code"] == 502
    assert data["api_response"] == "<html>"
    assert str(error) == "[502] bad gateway"


def test_detail_is_message():
    assert CommunityNotFoundException("abc").detail == "Community not found"
