"""Aggregation engine over journey snapshots.

Pure functions shared by every page derivation: location-name resolution,
scope filtering, time-series projection, missing-as-zero averaging,
cross-location grouping, 0-100 normalization and the harmony score.

Nothing here raises for normal data variation. Unmatched location ids
resolve to ``UNKNOWN_LOCATION``, absent readings count as 0 when averaging,
and empty inputs yield ``None`` ("no data"), never a numeric default.

Known caveat: substituting 0 for a missing reading drags averages down when
data is sparse. The source dashboard behaves this way and it is kept.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, Optional

from pydantic import BaseModel

from wildtrace.config import ALL_LOCATIONS, HRV_REFERENCE, SCORE_SCALE, UNKNOWN_LOCATION


@dataclass(frozen=True)
class MetricSummary:
    avg: Optional[float]
    min: Optional[float] = None
    max: Optional[float] = None


def field_value(record: Any, field: str) -> Any:
    """Read a field from a model or a plain mapping; absent fields are None."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _reading(record: Any, field: str) -> float:
    return field_value(record, field) or 0


def _mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


def resolve_location_name(locations: Iterable[Any], location_id: Optional[str]) -> str:
    if location_id is None:
        return UNKNOWN_LOCATION
    for location in locations:
        if field_value(location, "id") == location_id:
            return field_value(location, "name")
    return UNKNOWN_LOCATION


def filter_by_location(records: Iterable[Any], scope: str = ALL_LOCATIONS) -> list:
    """Keep records whose location_id equals scope; "all" keeps everything."""
    if scope == ALL_LOCATIONS:
        return list(records)
    return [r for r in records if field_value(r, "location_id") == scope]


def _as_dict(record: Any) -> dict:
    if isinstance(record, BaseModel):
        return record.model_dump()
    return dict(record)


def project_time_series(records: Iterable[Any], locations: Sequence[Any]) -> list[dict]:
    """Attach display_date and location_name to each record.

    Returns fresh dicts in input order. ``display_date`` is the raw date;
    use ``format_display_date`` for a label.
    """
    names = _name_index(locations)
    series = []
    for record in records:
        row = _as_dict(record)
        row["display_date"] = field_value(record, "date")
        row["location_name"] = names.get(field_value(record, "location_id"), UNKNOWN_LOCATION)
        series.append(row)
    return series


def format_display_date(value) -> str:
    """Short chart label, e.g. "Mar 4"."""
    return f"{value:%b} {value.day}"


def summarize_metric(
    records: Sequence[Any],
    field: str,
    min_field: Optional[str] = None,
    max_field: Optional[str] = None,
) -> MetricSummary:
    """Average ``field``; min/max come from the companion fields, not ``field``."""
    if not records:
        return MetricSummary(avg=None)
    avg = sum(_reading(r, field) for r in records) / len(records)
    low = min(_reading(r, min_field) for r in records) if min_field else None
    high = max(_reading(r, max_field) for r in records) if max_field else None
    return MetricSummary(avg=avg, min=low, max=high)


def group_and_average_by_location(
    records: Iterable[Any],
    locations: Sequence[Any],
    fields: Sequence[str],
) -> dict[str, dict[str, float]]:
    """Per-location means of ``fields``, keyed by name in first-seen order."""
    names = _name_index(locations)
    groups: dict[str, dict[str, list[float]]] = {}
    for record in records:
        name = names.get(field_value(record, "location_id"), UNKNOWN_LOCATION)
        bucket = groups.setdefault(name, {f: [] for f in fields})
        for f in fields:
            bucket[f].append(_reading(record, f))
    return {
        name: {f: _mean(values) for f, values in bucket.items()}
        for name, bucket in groups.items()
    }


def normalize(value: float, max_scale: float) -> float:
    """Rescale onto 0-100, capped at 100. ``max_scale`` must be positive."""
    return min(100.0, (value / max_scale) * 100)


def compute_harmony_score(record: Any) -> float:
    """Mean of HRV, sleep and inverted-stress sub-scores.

    Only the HRV sub-score is capped (at 100). Inputs are not clamped, so
    negative HRV or scores outside 0-10 give an out-of-range result.
    """
    hrv_score = normalize(_reading(record, "heart_rate_variability"), HRV_REFERENCE)
    sleep_score = (_reading(record, "sleep_quality_score") / SCORE_SCALE) * 100
    stress_score = ((SCORE_SCALE - _reading(record, "stress_level")) / SCORE_SCALE) * 100
    return (hrv_score + sleep_score + stress_score) / 3


def extremum(
    records: Iterable[Any],
    selector: Callable[[Any], float],
    mode: Literal["max", "min"] = "max",
) -> Optional[Any]:
    """First record with the largest (or smallest) selected value, or None."""
    if mode not in ("max", "min"):
        raise ValueError(f"Unknown extremum mode: {mode}")
    best = None
    best_value = None
    found = False
    for record in records:
        value = selector(record)
        if not found:
            better = True
        elif mode == "max":
            better = value > best_value
        else:
            better = value < best_value
        if better:
            best, best_value, found = record, value, True
    return best


def _name_index(locations: Iterable[Any]) -> dict:
    # First location wins for duplicate ids, matching resolve_location_name
    index = {}
    for location in locations:
        index.setdefault(field_value(location, "id"), field_value(location, "name"))
    return index
