from datetime import datetime, timedelta, timezone

from stremio_dvr.addon.service import DvrAddon
from stremio_dvr.upstream.client import UpstreamBadStatus, UpstreamUnreachable

from conftest import FakeSource, make_recording


def test_catalog_end_to_end(settings):
    yesterday = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()
    source = FakeSource([
        make_recording(
            id="done",
            name="Documentary",
            status="completed",
            duration_seconds=3600,
            file_size_bytes=734003200,
            started_at=yesterday,
        ),
        make_recording(
            id="live",
            name="Live Match",
            status="recording",
            is_active=True,
            elapsed_seconds=90,
            file_size_bytes=0,
            started_at="2000-01-01T00:00:00Z",
        ),
    ])

    metas = DvrAddon(source, settings).catalog().metas

    assert [m.id for m in metas] == ["dvr:live", "dvr:done"]
    assert metas[0].runtime == "1m"
    assert metas[1].runtime == "1h0m"
    assert "700.0MB" in metas[1].description
    assert metas[1].releaseInfo == yesterday[:10]
    assert source.calls == 1


def test_catalog_search(settings):
    source = FakeSource([
        make_recording(id="1", name="Evening News"),
        make_recording(id="2", name="Weather"),
    ])

    metas = DvrAddon(source, settings).catalog("news").metas

    assert [m.id for m in metas] == ["dvr:1"]


def test_catalog_upstream_failure_is_empty(settings, caplog):
    source = FakeSource(error=UpstreamBadStatus(500))

    assert DvrAddon(source, settings).catalog().metas == []
    assert "API returned status 500" in caplog.text


def test_meta_found(settings):
    source = FakeSource([make_recording(id="a"), make_recording(id="b", name="Other")])

    meta = DvrAddon(source, settings).meta("b").meta

    assert meta.id == "dvr:b"
    assert meta.name == "Other"


def test_meta_includes_ineligible_recordings(settings):
    source = FakeSource([make_recording(id="empty", file_size_bytes=0)])

    assert DvrAddon(source, settings).meta("empty").meta.id == "dvr:empty"


def test_meta_unknown_or_failed_is_null(settings):
    assert DvrAddon(FakeSource([make_recording()]), settings).meta("nope").meta is None
    assert DvrAddon(FakeSource(error=UpstreamUnreachable("down")), settings).meta("rec1").meta is None


def test_streams_for_active_recording(settings):
    source = FakeSource([make_recording(id="a", is_active=True, status="recording")])

    streams = DvrAddon(source, settings).streams("a").streams

    assert len(streams) == 1
    assert streams[0].url == "http://proxy:8080/record/stop/a?api_password=secret"


def test_streams_for_finished_recording(settings):
    source = FakeSource([make_recording(id="a")])

    streams = DvrAddon(source, settings).streams("a").streams

    assert [s.title for s in streams] == ["▶️ Play Recording", "🗑️ Delete Recording"]


def test_streams_for_unknown_recording_is_empty(settings):
    source = FakeSource([make_recording(id="a")])

    assert DvrAddon(source, settings).streams("b").streams == []


def test_streams_when_upstream_fails_offer_finished_actions(settings):
    source = FakeSource(error=UpstreamUnreachable("timed out"))

    streams = DvrAddon(source, settings).streams("xyz").streams

    assert [s.url for s in streams] == [
        "http://proxy:8080/api/recordings/xyz/stream?api_password=secret",
        "http://proxy:8080/api/recordings/xyz/delete?api_password=secret",
    ]
