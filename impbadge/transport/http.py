from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class HttpTransport:
    """Posts a packed bitmap to an agent URL as the raw request body."""

    def __init__(self, url: str, session: Optional[requests.Session] = None) -> None:
        self._url = url
        self._session = session

    @property
    def url(self) -> str:
        return self._url

    def send(self, payload: bytes) -> requests.Response:
        post = self._session.post if self._session is not None else requests.post
        logger.info("posting %d bytes to %s", len(payload), self._url)
        try:
            response = post(self._url, data=payload)
        except requests.RequestException as exc:
            raise RuntimeError(f"HTTP request failed: {exc}") from exc
        # The agent's reply is informational only
        logger.info("agent replied %s %s", response.status_code, response.reason)
        return response
