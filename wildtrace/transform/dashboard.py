"""Assemble every page's derived data into dashboard.json."""

import json
from datetime import date
from pathlib import Path

from wildtrace.config import ALL_LOCATIONS, DASHBOARD_JSON
from wildtrace.snapshot import JourneySnapshot, fetch_snapshot
from wildtrace.transform.biology import biological_page
from wildtrace.transform.environment import environmental_page
from wildtrace.transform.journal import journal_page
from wildtrace.transform.journey import journey_page


def build_dashboard(snapshot: JourneySnapshot, scope: str = ALL_LOCATIONS) -> dict:
    """Derived data for all pages, scoped to one location or "all"."""
    locations = snapshot.locations
    # Journal page lists newest first
    journal = sorted(snapshot.journal, key=lambda e: e.date, reverse=True)
    return {
        "scope": scope,
        "journey": journey_page(snapshot),
        "environmental": environmental_page(snapshot.environmental, locations, scope),
        "biological": biological_page(snapshot.biological, locations, scope),
        "journal": journal_page(journal, locations, scope),
        "generated": str(date.today()),
    }


def write_dashboard(dashboard: dict, path: Path | None = None) -> Path:
    path = Path(path) if path else DASHBOARD_JSON
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dashboard, indent=2, default=str))
    return path


def run_build(source_name: str | None = None, scope: str = ALL_LOCATIONS, path: Path | None = None) -> Path:
    """Load a snapshot, derive the dashboard and write it to disk."""
    print("[dashboard] Loading snapshot...")
    snapshot = fetch_snapshot(source_name)

    print("[dashboard] Building derived data...")
    dashboard = build_dashboard(snapshot, scope)

    out = write_dashboard(dashboard, path)
    print(f"[dashboard] {dashboard['environmental']['reading_count']} environmental, "
          f"{dashboard['biological']['reading_count']} biological, "
          f"{dashboard['journal']['entry_count']} journal -> {out}")
    return out
