import pytest

from stremio_dvr.config import Settings
from stremio_dvr.recording.models import Recording
from stremio_dvr.upstream.client import UpstreamError


class FakeSource:
    """Stands in for the EasyProxy client."""

    def __init__(self, recordings=None, error: UpstreamError | None = None):
        self.recordings = recordings or []
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.recordings)


def make_recording(**fields) -> Recording:
    data = {
        "id": "rec1",
        "name": "Evening News",
        "status": "completed",
        "started_at": "2026-10-17T20:00:00Z",
        "duration_seconds": 1800,
        "file_size_bytes": 1024,
        "is_active": False,
    }
    data.update(fields)
    return Recording.model_validate(data)


@pytest.fixture
def settings():
    return Settings(easyproxy_url="http://proxy:8080/", easyproxy_password="secret")


@pytest.fixture
def open_settings():
    return Settings(easyproxy_url="http://proxy:8080", easyproxy_password="")
