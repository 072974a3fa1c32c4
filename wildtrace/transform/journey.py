"""Journey map: route, map center and per-location detail panel."""

from collections.abc import Sequence

from wildtrace.engine import filter_by_location, summarize_metric
from wildtrace.models import Location
from wildtrace.snapshot import JourneySnapshot

# World view when there is nothing to center on
DEFAULT_CENTER = (20.0, 0.0)


def journey_path(locations: Sequence[Location]) -> list[tuple[float, float]]:
    """(lat, lng) pairs in arrival order."""
    ordered = sorted(locations, key=lambda loc: loc.arrival_date)
    return [(loc.latitude, loc.longitude) for loc in ordered]


def map_center(locations: Sequence[Location]) -> tuple[float, float]:
    if not locations:
        return DEFAULT_CENTER
    lat = summarize_metric(locations, "latitude").avg
    lng = summarize_metric(locations, "longitude").avg
    return (lat, lng)


def journey_span(locations: Sequence[Location]) -> dict | None:
    """First arrival and last departure (or arrival) of the trip."""
    if not locations:
        return None
    ordered = sorted(locations, key=lambda loc: loc.arrival_date)
    last = ordered[-1]
    return {"start": ordered[0].arrival_date, "end": last.departure_date or last.arrival_date}


def stay_days(location: Location) -> int | None:
    """Whole days between arrival and departure; None while still there."""
    if location.departure_date is None:
        return None
    return (location.departure_date - location.arrival_date).days


def location_detail(snapshot: JourneySnapshot, location_id: str) -> dict | None:
    """Side panel for one location; None when the id is unknown."""
    location = next((loc for loc in snapshot.locations if loc.id == location_id), None)
    if location is None:
        return None

    environmental = filter_by_location(snapshot.environmental, location_id)
    entries = filter_by_location(snapshot.journal, location_id)
    return {
        "location": {**location.model_dump(), "stay_days": stay_days(location)},
        "environment": {
            "reading_count": len(environmental),
            "avg_temperature": summarize_metric(environmental, "temperature_avg").avg,
            "avg_humidity": summarize_metric(environmental, "humidity").avg,
        },
        "journal": [e.model_dump() for e in entries],
    }


def journey_page(snapshot: JourneySnapshot) -> dict:
    return {
        "counts": snapshot.counts(),
        "path": journey_path(snapshot.locations),
        "center": map_center(snapshot.locations),
        "span": journey_span(snapshot.locations),
        "locations": [
            {**loc.model_dump(), "stay_days": stay_days(loc)}
            for loc in sorted(snapshot.locations, key=lambda loc: loc.arrival_date)
        ],
    }
