"""Load all four collections in parallel and join before deriving anything."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from wildtrace.config import DEFAULT_SOURCE
from wildtrace.models import BiologicalData, EnvironmentalData, JournalEntry, Location
from wildtrace.source.base import RecordSource


@dataclass(frozen=True)
class JourneySnapshot:
    locations: tuple[Location, ...] = ()
    environmental: tuple[EnvironmentalData, ...] = ()
    biological: tuple[BiologicalData, ...] = ()
    journal: tuple[JournalEntry, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "locations": len(self.locations),
            "environmental": len(self.environmental),
            "biological": len(self.biological),
            "journal": len(self.journal),
        }


def get_source(name: str | None = None) -> RecordSource:
    """Build the configured record source ('csv' or 'http')."""
    name = name or DEFAULT_SOURCE
    if name == "csv":
        from wildtrace.source.csv_store import CsvRecordSource
        return CsvRecordSource()
    if name == "http":
        from wildtrace.source.http import HttpRecordSource
        return HttpRecordSource()
    raise ValueError(f"Unknown record source '{name}'. Use 'csv' or 'http'.")


def load_snapshot(source: RecordSource, journal_order: str = "date") -> JourneySnapshot:
    """Fetch every collection concurrently; the first failure propagates."""
    with ThreadPoolExecutor(max_workers=4) as pool:
        locations = pool.submit(source.list_locations, "arrival_date")
        environmental = pool.submit(source.list_environmental, "date")
        biological = pool.submit(source.list_biological, "date")
        journal = pool.submit(source.list_journal, journal_order)

        snapshot = JourneySnapshot(
            locations=tuple(locations.result()),
            environmental=tuple(environmental.result()),
            biological=tuple(biological.result()),
            journal=tuple(journal.result()),
        )

    print(f"[snapshot] Loaded from {source.source_name}: {snapshot.counts()}")
    return snapshot


def fetch_snapshot(source_name: str | None = None) -> JourneySnapshot:
    """Load a snapshot from the configured source, then close the source."""
    source = get_source(source_name)
    try:
        return load_snapshot(source)
    finally:
        source.close()
