"""CSV-file record source: one file per collection under data/raw/."""

import csv
import uuid
from pathlib import Path
from typing import Optional

import pandas as pd
from pydantic import BaseModel

from wildtrace.config import RAW_DIR
from wildtrace.models import BiologicalData, EnvironmentalData, JournalEntry, JournalEntryCreate, Location
from wildtrace.source.base import RecordSource, parse_order_by

# Collection name -> (file name, model)
COLLECTIONS = {
    "locations": ("locations.csv", Location),
    "environmental": ("environmental.csv", EnvironmentalData),
    "biological": ("biological.csv", BiologicalData),
    "journal": ("journal.csv", JournalEntry),
}

JOURNAL_COLUMNS = [
    "id", "location_id", "date", "title", "content", "emotions",
    "mood_score", "highlight_moment", "image_url", "audio_url",
]

# Text fields stay strings even when every value looks numeric
TEXT_TYPES = (str, Optional[str])


def text_dtypes(model: type[BaseModel]) -> dict[str, type]:
    """dtype map reading every str field of ``model`` as text."""
    return {name: str for name, field in model.model_fields.items() if field.annotation in TEXT_TYPES}


def load_csv(filepath: Path, order_by: str | None = None, dtype: dict | None = None) -> pd.DataFrame:
    """Read a collection CSV and sort it; a missing file is an empty frame."""
    if not filepath.exists():
        return pd.DataFrame()
    df = pd.read_csv(filepath, dtype=dtype)
    column, descending = parse_order_by(order_by)
    if column and column in df.columns:
        df = df.sort_values(column, ascending=not descending, kind="stable").reset_index(drop=True)
    return df


def _rows(df: pd.DataFrame) -> list[dict]:
    """Frame rows as dicts with NaN replaced by None."""
    if df.empty:
        return []
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


class CsvRecordSource(RecordSource):
    source_name = "csv"

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir else RAW_DIR

    def _path(self, collection: str) -> Path:
        return self.data_dir / COLLECTIONS[collection][0]

    def _list(self, collection: str, order_by: str | None) -> list:
        model = COLLECTIONS[collection][1]
        df = load_csv(self._path(collection), order_by, text_dtypes(model))
        return [model.model_validate(row) for row in _rows(df)]

    def list_locations(self, order_by: str | None = "arrival_date") -> list[Location]:
        return self._list("locations", order_by)

    def list_environmental(self, order_by: str | None = "date") -> list[EnvironmentalData]:
        return self._list("environmental", order_by)

    def list_biological(self, order_by: str | None = "date") -> list[BiologicalData]:
        return self._list("biological", order_by)

    def list_journal(self, order_by: str | None = "date") -> list[JournalEntry]:
        return self._list("journal", order_by)

    def create_journal_entry(self, record: JournalEntryCreate) -> JournalEntry:
        entry = JournalEntry(id=uuid.uuid4().hex, **record.model_dump())
        filepath = self._path("journal")
        filepath.parent.mkdir(parents=True, exist_ok=True)

        row = entry.model_dump()
        row["date"] = entry.date.isoformat()
        row["emotions"] = "; ".join(entry.emotions)

        write_header = not filepath.exists()
        with open(filepath, "a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=JOURNAL_COLUMNS)
            if write_header:
                writer.writeheader()
            writer.writerow({col: row.get(col) for col in JOURNAL_COLUMNS})

        return entry
