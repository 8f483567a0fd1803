"""Thin HTTP client for the Discourse forum API."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from shared.errors import ForumRequestError

logger = logging.getLogger(__name__)


class DiscourseClient:
    """
    Fetches forum-side data from a Discourse instance.

    Each community has its own forum, so the base URL is given per call;
    the service credentials are shared and fixed at construction time.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_username: str = "system",
        *,
        timeout: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initializes the Discourse client.

        Args:
            api_key: The Discourse API key sent as ``Api-Key``.
            api_username: The user the API key acts as, sent as ``Api-Username``.
            timeout: Seconds to wait for the forum before giving up.
            session: Optional ``requests.Session`` to reuse connections. Without
                one each lookup is a plain ``requests.get``.
        """
        self.api_key = api_key
        self.api_username = api_username
        self.timeout = timeout
        self.session = session

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"Api-Username": self.api_username, "Accept": "application/json"}
        if self.api_key:
            headers["Api-Key"] = self.api_key
        return headers

    def user_url(self, base_url: str, username: str) -> str:
        return f"{base_url.rstrip('/')}/u/{quote(username, safe='')}.json"

    def get_user_profile(self, base_url: str, username: str) -> Dict[str, Any]:
        """
        Fetch a forum user's public profile.

        Args:
            base_url: Root URL of the community's Discourse forum.
            username: Forum username to look up.

        Returns:
            dict: The ``user`` object from the forum's response.

        Raises:
            ForumRequestError: On transport failure, a non-2xx status, or a
                response body without a ``user`` object.
        """
        url = self.user_url(base_url, username)
        try:
            http = self.session or requests
            response = http.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Discourse request to %s failed: %s", url, e)
            raise ForumRequestError(
                f"Discourse request failed: {e}",
                url=url,
                api_response=str(e)
            ) from e

        if not response.ok:
            logger.warning("Discourse returned %s for %s", response.status_code, url)
            raise ForumRequestError(
                f"Discourse returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
                api_response=response.text
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ForumRequestError(
                "Could not parse Discourse response",
                url=url,
                status_code=response.status_code,
                api_response=response.text
            ) from e

        user = payload.get("user") if isinstance(payload, dict) else None
        if not isinstance(user, dict):
            raise ForumRequestError(
                "Discourse response did not include a user",
                url=url,
                status_code=response.status_code,
                api_response=response.text
            )
        return user
