"""Recording records as reported by the EasyProxy DVR API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

FINISHED_STATUSES = frozenset({"completed", "stopped", "failed"})


class Lifecycle(str, Enum):
    """Display lifecycle of a recording, derived at read time."""

    ACTIVE = "active"
    ELIGIBLE = "eligible"
    INELIGIBLE = "ineligible"


class Recording(BaseModel):
    """A single DVR recording, active or finished."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    name: str = ""
    url: str = ""
    file_path: str = ""
    status: str = ""
    started_at: str = ""
    stopped_at: str = ""
    duration_seconds: float = 0.0
    file_size_bytes: int = 0
    is_active: bool = False
    elapsed_seconds: float = 0.0

    @field_validator(
        "id", "name", "url", "file_path", "status", "started_at", "stopped_at",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator(
        "duration_seconds", "file_size_bytes", "is_active", "elapsed_seconds",
        mode="before",
    )
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value


class RecordingsPayload(BaseModel):
    """Body of ``GET /api/recordings``."""

    recordings: list[Recording] = []

    @field_validator("recordings", mode="before")
    @classmethod
    def _null_as_no_recordings(cls, value):
        return [] if value is None else value
