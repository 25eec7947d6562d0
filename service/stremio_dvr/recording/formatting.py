"""Human readable labels for recording details."""

import re
from datetime import datetime

SIZE_UNITS = ("B", "KB", "MB", "GB")

# Fractional seconds of any length; fromisoformat wants exactly 3 or 6 digits.
_FRACTION = re.compile(r"(?<=:\d\d)\.(\d+)")


def format_duration(seconds: float) -> str:
    """Render seconds as ``XhYm`` (or ``Ym`` under an hour); empty when <= 0."""
    if seconds <= 0:
        return ""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    if hours > 0:
        return f"{hours}h{minutes}m"
    return f"{minutes}m"


def format_file_size(size_bytes: float) -> str:
    """Render a byte count with binary unit scaling, e.g. ``1.5KB``."""
    if size_bytes <= 0:
        return ""
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.1f}{SIZE_UNITS[unit_index]}"


def format_date(timestamp: str) -> str:
    """``YYYY-MM-DD`` of an ISO-8601 timestamp, or empty if it does not parse."""
    if not timestamp:
        return ""
    try:
        normalized = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), timestamp)
        parsed = datetime.fromisoformat(normalized.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return parsed.strftime("%Y-%m-%d")
