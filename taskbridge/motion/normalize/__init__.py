"""Field normalization for ambiguous upstream representations."""

from .fields import (
    DURATION_SENTINELS,
    Duration,
    normalize_duration,
    normalize_labels,
    normalize_record,
    normalize_status,
    normalize_statuses,
)

__all__ = [
    "DURATION_SENTINELS",
    "Duration",
    "normalize_duration",
    "normalize_labels",
    "normalize_record",
    "normalize_status",
    "normalize_statuses",
]
