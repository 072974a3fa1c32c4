"""Environmental page: headline stats and per-location radar profile."""

from collections.abc import Sequence

from wildtrace.config import NORMALIZATION_SCALES
from wildtrace.engine import filter_by_location, group_and_average_by_location, normalize, project_time_series, summarize_metric
from wildtrace.models import EnvironmentalData, Location

# Radar axis -> (record field, normalization key or None for pass-through)
RADAR_AXES = {
    "Temperature": ("temperature_avg", "temperature"),
    "Humidity": ("humidity", None),
    "Light": ("light_exposure", "light"),
    "Air Quality": ("air_quality_index", "air_quality"),
    "Noise": ("noise_level", "noise"),
}


def metric_stats(records: Sequence[EnvironmentalData]) -> dict:
    """Averages for the overview cards; empty dict when there is no data."""
    if not records:
        return {}
    temperature = summarize_metric(records, "temperature_avg", "temperature_min", "temperature_max")
    return {
        "temperature": {"avg": temperature.avg, "min": temperature.min, "max": temperature.max},
        "humidity": {"avg": summarize_metric(records, "humidity").avg},
        "light": {"avg": summarize_metric(records, "light_exposure").avg},
        "air_quality": {"avg": summarize_metric(records, "air_quality_index").avg},
    }


def radar_profile(
    records: Sequence[EnvironmentalData],
    locations: Sequence[Location],
    scales: dict[str, float] | None = None,
) -> list[dict]:
    """One row per location with every axis rescaled to 0-100."""
    scales = scales or NORMALIZATION_SCALES
    fields = [field for field, _ in RADAR_AXES.values()]
    averages = group_and_average_by_location(records, locations, fields)

    profile = []
    for location, means in averages.items():
        row = {"location": location}
        for axis, (field, scale_key) in RADAR_AXES.items():
            value = means[field]
            row[axis] = value if scale_key is None else normalize(value, scales[scale_key])
        profile.append(row)
    return profile


def environmental_page(records: Sequence[EnvironmentalData], locations: Sequence[Location], scope: str) -> dict:
    scoped = filter_by_location(records, scope)
    return {
        "reading_count": len(scoped),
        "stats": metric_stats(scoped),
        "timeline": project_time_series(scoped, locations),
        "radar": radar_profile(scoped, locations),
    }
