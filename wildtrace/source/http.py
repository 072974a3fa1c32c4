"""HTTP record source for a hosted journey backend."""

import httpx

from wildtrace.config import API_TOKEN, API_URL
from wildtrace.models import BiologicalData, EnvironmentalData, JournalEntry, JournalEntryCreate, Location
from wildtrace.source.base import RecordSource

ENDPOINTS = {
    "locations": ("locations", Location),
    "environmental": ("environmental", EnvironmentalData),
    "biological": ("biological", BiologicalData),
    "journal": ("journal", JournalEntry),
}


class HttpRecordSource(RecordSource):
    source_name = "http"

    def __init__(self, base_url: str | None = None, token: str | None = None, transport: httpx.BaseTransport | None = None):
        self.base_url = base_url or API_URL
        if not self.base_url:
            raise ValueError("WILDTRACE_API_URL not set in environment. Add it to .env")
        token = token if token is not None else API_TOKEN
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self.client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=30,
            transport=transport,
        )

    def _fetch(self, collection: str, order_by: str | None) -> list:
        endpoint, model = ENDPOINTS[collection]
        params = {"sort": order_by} if order_by else {}
        resp = self.client.get(f"/{endpoint}", params=params)
        resp.raise_for_status()
        body = resp.json()
        items = body if isinstance(body, list) else body.get("data", [])
        return [model.model_validate(item) for item in items]

    def list_locations(self, order_by: str | None = "arrival_date") -> list[Location]:
        return self._fetch("locations", order_by)

    def list_environmental(self, order_by: str | None = "date") -> list[EnvironmentalData]:
        return self._fetch("environmental", order_by)

    def list_biological(self, order_by: str | None = "date") -> list[BiologicalData]:
        return self._fetch("biological", order_by)

    def list_journal(self, order_by: str | None = "date") -> list[JournalEntry]:
        return self._fetch("journal", order_by)

    def create_journal_entry(self, record: JournalEntryCreate) -> JournalEntry:
        resp = self.client.post("/journal", json=record.model_dump(mode="json"))
        resp.raise_for_status()
        return JournalEntry.model_validate(resp.json())

    def close(self) -> None:
        self.client.close()
