"""Biological page: biometric stats, harmony zones and recovery insights."""

from collections.abc import Sequence

from wildtrace.engine import (
    compute_harmony_score,
    extremum,
    filter_by_location,
    format_display_date,
    project_time_series,
    resolve_location_name,
    summarize_metric,
)
from wildtrace.models import BiologicalData, Location

# Upper bound (inclusive) of each stress band on the 0-10 scale
STRESS_BANDS = [
    (3, "low"),
    (6, "medium"),
]


def stress_band(level: float) -> str:
    for upper, band in STRESS_BANDS:
        if level <= upper:
            return band
    return "high"


def biometric_stats(records: Sequence[BiologicalData]) -> dict:
    if not records:
        return {}
    heart_rate = summarize_metric(records, "heart_rate_resting", "heart_rate_resting", "heart_rate_resting")
    return {
        "heart_rate": {"avg": heart_rate.avg, "range": [heart_rate.min, heart_rate.max]},
        "hrv": {"avg": summarize_metric(records, "heart_rate_variability").avg},
        "sleep": {
            "avg": summarize_metric(records, "sleep_quality_score").avg,
            "avg_duration": summarize_metric(records, "sleep_duration").avg,
        },
        "stress": {"avg": summarize_metric(records, "stress_level").avg},
    }


def harmony_zones(records: Sequence[BiologicalData], locations: Sequence[Location]) -> list[dict]:
    """Scatter points of sleep vs HRV, tagged with harmony score and stress band."""
    zones = []
    for record in records:
        zones.append({
            "location": resolve_location_name(locations, record.location_id),
            "date": record.date,
            "label": format_display_date(record.date),
            "harmony_score": compute_harmony_score(record),
            "stress_level": record.stress_level,
            "stress_band": stress_band(record.stress_level or 0),
            "sleep_quality": record.sleep_quality_score,
            "hrv": record.heart_rate_variability,
        })
    return zones


def insights(zones: Sequence[dict]) -> dict:
    """Best recovery, best sleep and calmest place; None where there is no data."""
    return {
        "best_recovery": extremum(zones, lambda z: z["hrv"] or 0, mode="max"),
        "best_sleep": extremum(zones, lambda z: z["sleep_quality"] or 0, mode="max"),
        "calmest": extremum(zones, lambda z: z["stress_level"] or 0, mode="min"),
    }


def biological_page(records: Sequence[BiologicalData], locations: Sequence[Location], scope: str) -> dict:
    scoped = filter_by_location(records, scope)
    zones = harmony_zones(scoped, locations)
    return {
        "reading_count": len(scoped),
        "stats": biometric_stats(scoped),
        "timeline": project_time_series(scoped, locations),
        "harmony_zones": zones,
        "insights": insights(zones),
    }
