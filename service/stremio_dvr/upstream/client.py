"""HTTP client for the EasyProxy recordings API."""

import logging

import requests
from pydantic import ValidationError

from stremio_dvr.config import Settings
from stremio_dvr.recording.models import Recording, RecordingsPayload

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The recordings list could not be obtained."""


class UpstreamUnreachable(UpstreamError):
    """Transport-level failure (DNS, connection, timeout)."""


class UpstreamBadStatus(UpstreamError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"API returned status {status_code}")
        self.status_code = status_code


class UpstreamBadPayload(UpstreamError):
    """The API answered 200 with a body that is not a recordings list."""


class UpstreamClient:
    """Fetches the recording list from EasyProxy, one request per call."""

    def __init__(self, base_url: str, password: str = "", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamClient":
        return cls(
            base_url=settings.easyproxy_url,
            password=settings.easyproxy_password,
            timeout=settings.request_timeout,
        )

    def fetch(self) -> list[Recording]:
        """Return all recordings known to EasyProxy.

        Raises an ``UpstreamError`` subclass on any failure; nothing is retried.
        """
        params = {}
        headers = {"Accept": "application/json"}
        if self.password:
            params["api_password"] = self.password
            headers["x-api-password"] = self.password

        try:
            response = requests.get(
                f"{self.base_url}/api/recordings",
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamUnreachable(str(e)) from e

        if response.status_code != 200:
            raise UpstreamBadStatus(response.status_code)

        try:
            payload = RecordingsPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise UpstreamBadPayload(f"Invalid recordings payload: {e.error_count()} error(s)") from e

        logger.debug("Fetched %d recordings from %s", len(payload.recordings), self.base_url)
        return payload.recordings
