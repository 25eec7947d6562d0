"""Lifecycle classification and ordering of recordings."""

from collections.abc import Iterable

from stremio_dvr.recording.models import FINISHED_STATUSES, Lifecycle, Recording


def lifecycle(recording: Recording) -> Lifecycle:
    """Classify a recording from its active flag, status and file size."""
    if recording.is_active and recording.status == "recording":
        return Lifecycle.ACTIVE
    if recording.status in FINISHED_STATUSES and recording.file_size_bytes > 0:
        return Lifecycle.ELIGIBLE
    return Lifecycle.INELIGIBLE


def matches_search(recording: Recording, query: str) -> bool:
    """Case-insensitive substring match of ``query`` against the name."""
    return query.lower() in recording.name.lower()


def classify(
    records: Iterable[Recording], search_query: str = ""
) -> tuple[list[Recording], list[Recording]]:
    """Split records into (active, eligible), dropping everything else.

    Records keep their input order within each bucket.
    """
    active: list[Recording] = []
    eligible: list[Recording] = []

    for recording in records:
        if search_query and not matches_search(recording, search_query):
            continue

        state = lifecycle(recording)
        if state is Lifecycle.ACTIVE:
            active.append(recording)
        elif state is Lifecycle.ELIGIBLE:
            eligible.append(recording)

    return active, eligible


def order(records: Iterable[Recording]) -> list[Recording]:
    """Newest first by ``started_at``; ties keep their input order."""
    # ISO-8601 strings compare in time order, and reverse sorting stays stable.
    return sorted(records, key=lambda r: r.started_at, reverse=True)


def compose_catalog(records: Iterable[Recording], search_query: str = "") -> list[Recording]:
    """Active recordings first, then eligible ones, each newest first."""
    active, eligible = classify(records, search_query)
    return order(active) + order(eligible)


def find_recording(records: Iterable[Recording], recording_id: str) -> Recording | None:
    for recording in records:
        if recording.id == recording_id:
            return recording
    return None
