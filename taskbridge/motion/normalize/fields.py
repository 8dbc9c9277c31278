"""Normalizers for union-typed Motion fields.

The upstream documents one type per field and delivers another often enough
that declared types cannot be trusted. Each normalizer here matches on the
runtime shape of the decoded JSON value, has an explicit branch for shapes it
does not recognize, and never raises.

Canonical targets:
    status   -> NormalizedStatus (name plus optional flags)
    duration -> non-negative minutes, "NONE", "REMINDER", or None
    labels   -> list of label names
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Literal, Union

from ..models import NormalizedStatus

logger = logging.getLogger(__name__)

DURATION_SENTINELS = ("NONE", "REMINDER")

Duration = Union[int, float, Literal["NONE", "REMINDER"], None]


def _unrecognized(field_name: str, raw: Any) -> None:
    logger.warning(
        "field_unrecognized_shape",
        extra={"field": field_name, "received_type": type(raw).__name__},
    )


def _flag(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def normalize_status(raw: Any) -> NormalizedStatus:
    """Normalize a status given as a name or as a status object.

    Absent or unreadable statuses yield ``NormalizedStatus(name=None)``.
    """
    if raw is None:
        return NormalizedStatus()

    if isinstance(raw, str):
        name = raw.strip()
        return NormalizedStatus(name=name or None)

    if isinstance(raw, Mapping):
        name = raw.get("name")
        if isinstance(name, str) and name.strip():
            return NormalizedStatus(
                name=name,
                is_default_status=_flag(raw.get("isDefaultStatus")),
                is_resolved_status=_flag(raw.get("isResolvedStatus")),
            )

    _unrecognized("status", raw)
    return NormalizedStatus()


def normalize_statuses(raw: Any) -> list[NormalizedStatus]:
    """Normalize a list of statuses (e.g. a workspace's ``statuses``)."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        _unrecognized("statuses", raw)
        return []
    statuses = [normalize_status(entry) for entry in raw]
    return [status for status in statuses if status.name is not None]


def normalize_duration(raw: Any) -> Duration:
    """Normalize a task duration.

    Returns the number of minutes for a non-negative number, the sentinel
    string for ``"NONE"``/``"REMINDER"``, and None for anything else.
    """
    if raw is None:
        return None

    # bool is an int subclass; True is not a duration
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if math.isfinite(raw) and raw >= 0:
            return raw
        _unrecognized("duration", raw)
        return None

    if isinstance(raw, str) and raw in DURATION_SENTINELS:
        return raw

    _unrecognized("duration", raw)
    return None


def normalize_labels(raw: Any) -> list[str]:
    """Normalize labels given as names or as ``{"name": ...}`` objects.

    Order is preserved. Entries of unknown shape are dropped and logged; a
    value that is not a list yields an empty list.
    """
    if raw is None:
        return []

    if not isinstance(raw, list):
        _unrecognized("labels", raw)
        return []

    names: list[str] = []
    for entry in raw:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
        else:
            _unrecognized("labels[]", entry)
    return names


def normalize_record(record: Any) -> Any:
    """Return a copy of a task/project/workspace record with union fields normalized.

    Only fields present on the record are touched. Non-dict records are
    returned unchanged.
    """
    if not isinstance(record, dict):
        return record

    normalized = dict(record)
    if "status" in normalized:
        normalized["status"] = normalize_status(normalized["status"])
    if "duration" in normalized:
        normalized["duration"] = normalize_duration(normalized["duration"])
    if "labels" in normalized:
        normalized["labels"] = normalize_labels(normalized["labels"])
    if "statuses" in normalized:
        normalized["statuses"] = normalize_statuses(normalized["statuses"])
    for nested in ("project", "workspace"):
        if isinstance(normalized.get(nested), dict):
            normalized[nested] = normalize_record(normalized[nested])
    return normalized
