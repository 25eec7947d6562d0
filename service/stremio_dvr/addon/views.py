"""Mapping of recordings onto Stremio meta items and stream actions."""

from urllib.parse import quote, urlencode

from stremio_dvr.addon.manifest import ITEM_TYPE, to_addon_id
from stremio_dvr.addon.models import MetaItem, Stream
from stremio_dvr.recording.classifier import lifecycle
from stremio_dvr.recording.formatting import format_date, format_duration, format_file_size
from stremio_dvr.recording.models import Lifecycle, Recording

UNKNOWN_NAME = "Unknown Recording"
LIVE_MARKER = "🔴 "

STOP_AND_WATCH = "⏹️ Stop & Watch"
PLAY = "▶️ Play Recording"
DELETE = "🗑️ Delete Recording"


def to_display(recording: Recording) -> MetaItem:
    """Render a recording as a catalog/meta item."""
    name = recording.name or UNKNOWN_NAME
    size = format_file_size(recording.file_size_bytes)
    date = format_date(recording.started_at)

    if lifecycle(recording) is Lifecycle.ACTIVE:
        elapsed = format_duration(recording.elapsed_seconds)
        name = LIVE_MARKER + name
        description = "Recording in progress..."
        if elapsed:
            description += f"\nElapsed: {elapsed}"
        if size:
            description += f" | Size: {size}"
        runtime = elapsed
    else:
        duration = format_duration(recording.duration_seconds)
        details = [detail for detail in (duration, size, date) if detail]
        description = f"Status: {recording.status}"
        if details:
            description += "\n" + " | ".join(details)
        runtime = duration

    return MetaItem(
        id=to_addon_id(recording.id),
        type=ITEM_TYPE,
        name=name,
        description=description,
        releaseInfo=date,
        runtime=runtime,
    )


def _action_url(base_url: str, path: str, password: str) -> str:
    url = f"{base_url}{path}"
    if password:
        url += "?" + urlencode({"api_password": password})
    return url


def to_actions(recording_id: str, is_active: bool, base_url: str, password: str = "") -> list[Stream]:
    """Actions offered for a recording.

    An active recording can only be stopped (and then watched); a finished
    one can be played or deleted, in that order.
    """
    recording_id = quote(recording_id, safe="")
    if is_active:
        return [
            Stream(
                url=_action_url(base_url, f"/record/stop/{recording_id}", password),
                title=STOP_AND_WATCH,
            )
        ]
    return [
        Stream(
            url=_action_url(base_url, f"/api/recordings/{recording_id}/stream", password),
            title=PLAY,
        ),
        Stream(
            url=_action_url(base_url, f"/api/recordings/{recording_id}/delete", password),
            title=DELETE,
        ),
    ]
