"""Query facade composing fetch, classification and mapping per view."""

import logging
from typing import Protocol

from stremio_dvr.addon.models import CatalogResponse, MetaResponse, StreamsResponse
from stremio_dvr.addon.views import to_actions, to_display
from stremio_dvr.config import Settings
from stremio_dvr.recording.classifier import compose_catalog, find_recording, lifecycle
from stremio_dvr.recording.models import Lifecycle, Recording
from stremio_dvr.upstream.client import UpstreamError

logger = logging.getLogger(__name__)


class RecordingSource(Protocol):
    def fetch(self) -> list[Recording]: ...


class DvrAddon:
    """Answers catalog, meta and stream requests from a fresh recording list."""

    def __init__(self, source: RecordingSource, settings: Settings):
        self.source = source
        self.base_url = settings.easyproxy_url
        self.password = settings.easyproxy_password

    def catalog(self, search_query: str = "") -> CatalogResponse:
        logger.info("Fetching recordings catalog (search: %r)", search_query)
        try:
            recordings = self.source.fetch()
        except UpstreamError as e:
            logger.warning("Error fetching recordings: %s", e)
            return CatalogResponse()

        metas = [to_display(r) for r in compose_catalog(recordings, search_query)]
        logger.info("Returning %d recordings", len(metas))
        return CatalogResponse(metas=metas)

    def meta(self, recording_id: str) -> MetaResponse:
        try:
            recordings = self.source.fetch()
        except UpstreamError as e:
            logger.warning("Error fetching recordings for meta %s: %s", recording_id, e)
            return MetaResponse()

        recording = find_recording(recordings, recording_id)
        if recording is None:
            return MetaResponse()
        return MetaResponse(meta=to_display(recording))

    def streams(self, recording_id: str) -> StreamsResponse:
        try:
            recordings = self.source.fetch()
        except UpstreamError as e:
            # Without an answer from EasyProxy the recording is offered as finished.
            logger.warning("Error fetching recordings for stream %s: %s", recording_id, e)
            is_active = False
        else:
            recording = find_recording(recordings, recording_id)
            if recording is None:
                logger.info("Stream request for unknown recording: %s", recording_id)
                return StreamsResponse()
            is_active = lifecycle(recording) is Lifecycle.ACTIVE

        logger.info("Stream request for recording: %s (active: %s)", recording_id, is_active)
        return StreamsResponse(
            streams=to_actions(recording_id, is_active, self.base_url, self.password)
        )
