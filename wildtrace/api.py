from __future__ import annotations

import os
from collections.abc import Iterator

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from wildtrace.config import ALL_LOCATIONS
from wildtrace.models import JournalEntry, JournalEntryCreate
from wildtrace.snapshot import get_source, load_snapshot
from wildtrace.source.base import RecordSource
from wildtrace.transform.dashboard import build_dashboard
from wildtrace.transform.journey import location_detail

ALLOWED_ORIGINS = [o.strip() for o in os.getenv("WILDTRACE_CORS", "http://localhost:3000").split(",") if o.strip()]

app = FastAPI(title="Wildtrace Journey API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


def source() -> Iterator[RecordSource]:
    records = get_source()
    try:
        yield records
    finally:
        records.close()


@app.get("/health")
def health() -> dict:
    return {"ok": True}


@app.get("/dashboard")
def dashboard(location: str = ALL_LOCATIONS, records: RecordSource = Depends(source)) -> dict:
    return build_dashboard(load_snapshot(records), location)


@app.get("/locations/{location_id}")
def location(location_id: str, records: RecordSource = Depends(source)) -> dict:
    detail = location_detail(load_snapshot(records), location_id)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Unknown location: {location_id}")
    return detail


@app.post("/journal", status_code=201)
def create_journal_entry(payload: JournalEntryCreate, records: RecordSource = Depends(source)) -> JournalEntry:
    return records.create_journal_entry(payload)
