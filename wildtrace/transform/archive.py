"""Export the raw collections as CSVs with location names resolved."""

from pathlib import Path

import pandas as pd

from wildtrace.config import EXPORT_DIR
from wildtrace.engine import resolve_location_name
from wildtrace.snapshot import JourneySnapshot

LOCATION_COLUMNS = ["name", "country", "latitude", "longitude", "arrival_date", "departure_date", "description"]
BIOLOGICAL_COLUMNS = [
    "location_name", "date", "heart_rate_resting", "heart_rate_active", "heart_rate_variability",
    "body_temperature", "sleep_quality_score", "sleep_duration", "respiratory_rate", "activity_level", "stress_level",
]
ENVIRONMENTAL_COLUMNS = [
    "location_name", "date", "temperature_avg", "temperature_min", "temperature_max",
    "humidity", "light_exposure", "air_quality_index", "noise_level", "weather_condition",
]
JOURNAL_COLUMNS = ["location_name", "date", "title", "content", "emotions", "mood_score", "highlight_moment"]


def _frame(records, columns: list[str], locations=None, date_format: str = "%Y-%m-%d") -> pd.DataFrame:
    rows = []
    for record in records:
        row = record.model_dump()
        if locations is not None:
            row["location_name"] = resolve_location_name(locations, record.location_id)
        if "date" in row:
            row["date"] = row["date"].strftime(date_format)
        if "emotions" in row:
            row["emotions"] = "; ".join(row["emotions"])
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def export_archive(snapshot: JourneySnapshot, out_dir: Path | None = None) -> dict[str, Path]:
    """Write one CSV per non-empty collection; returns name -> path."""
    out_dir = Path(out_dir) if out_dir else EXPORT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    locations = snapshot.locations

    frames = {
        "locations": _frame(locations, LOCATION_COLUMNS),
        "biological_data": _frame(snapshot.biological, BIOLOGICAL_COLUMNS, locations, "%Y-%m-%d %H:%M:%S"),
        "environmental_data": _frame(snapshot.environmental, ENVIRONMENTAL_COLUMNS, locations),
        "journal_entries": _frame(snapshot.journal, JOURNAL_COLUMNS, locations),
    }

    written = {}
    for name, df in frames.items():
        if df.empty:
            print(f"  [{name}] No data found, skipping")
            continue
        path = out_dir / f"{name}.csv"
        df.to_csv(path, index=False)
        written[name] = path
        print(f"  [{name}] {len(df)} rows -> {path}")
    return written
