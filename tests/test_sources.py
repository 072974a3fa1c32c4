import json
from datetime import date

import httpx
import pytest

from wildtrace.models import JournalEntryCreate
from wildtrace.source.base import parse_order_by
from wildtrace.source.csv_store import CsvRecordSource
from wildtrace.source.http import HttpRecordSource

LOCATIONS_CSV = """id,name,country,latitude,longitude,arrival_date,departure_date,description,image_url
2,Kyoto,Japan,35.0,135.8,2024-03-01,2024-03-05,,
1,Lima,Peru,-12.0,-77.0,2024-02-01,,Coastal,
"""

BIOLOGICAL_CSV = """id,location_id,date,heart_rate_resting,heart_rate_variability,sleep_quality_score,stress_level
b2,1,2024-02-04T07:00:00,64,,6,
b1,1,2024-02-03T07:00:00,60,42,7,3
"""


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "locations.csv").write_text(LOCATIONS_CSV)
    (tmp_path / "biological.csv").write_text(BIOLOGICAL_CSV)
    return tmp_path


def test_parse_order_by() -> None:
    assert parse_order_by("-date") == ("date", True)
    assert parse_order_by("arrival_date") == ("arrival_date", False)
    assert parse_order_by(None) == (None, False)


def test_csv_source_sorts_and_keeps_string_ids(data_dir) -> None:
    source = CsvRecordSource(data_dir)
    locations = source.list_locations("arrival_date")
    assert [loc.id for loc in locations] == ["1", "2"]
    assert locations[0].departure_date is None
    assert locations[0].description == "Coastal"

    descending = source.list_locations("-arrival_date")
    assert [loc.name for loc in descending] == ["Kyoto", "Lima"]


def test_csv_source_blank_readings_are_none(data_dir) -> None:
    records = CsvRecordSource(data_dir).list_biological("date")
    assert [r.id for r in records] == ["b1", "b2"]
    assert records[1].heart_rate_variability is None
    assert records[1].stress_level is None


def test_csv_source_missing_file_is_empty(data_dir) -> None:
    assert CsvRecordSource(data_dir).list_environmental() == []


def test_csv_source_create_journal_entry_round_trips(tmp_path) -> None:
    source = CsvRecordSource(tmp_path)
    created = source.create_journal_entry(JournalEntryCreate(
        location_id="1", date=date(2024, 2, 4), title="Market, day",
        content="Ceviche", emotions=["joy", "calm"], mood_score=8, highlight_moment=True,
    ))
    source.create_journal_entry(JournalEntryCreate(location_id="1", date=date(2024, 2, 5), title="Rain"))

    entries = source.list_journal("-date")
    assert [e.title for e in entries] == ["Rain", "Market, day"]
    assert entries[1].id == created.id
    assert entries[1].emotions == ("joy", "calm")
    assert entries[1].mood_score == 8
    assert entries[1].highlight_moment is True
    assert entries[0].mood_score is None
    assert entries[0].highlight_moment is False


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/locations":
        assert request.url.params["sort"] == "arrival_date"
        assert request.headers["Authorization"] == "Bearer secret"
        return httpx.Response(200, json=[{
            "id": "1", "name": "Lima", "country": "Peru", "latitude": -12, "longitude": -77,
            "arrival_date": "2024-02-01",
        }])
    if request.url.path == "/environmental":
        return httpx.Response(200, json={"data": [{"id": "e1", "location_id": "1", "date": "2024-02-02"}]})
    if request.url.path == "/journal" and request.method == "POST":
        payload = json.loads(request.content)
        return httpx.Response(201, json={"id": "new", **payload})
    return httpx.Response(500, json={"error": "boom"})


def _http_source() -> HttpRecordSource:
    return HttpRecordSource("http://backend.test", "secret", transport=httpx.MockTransport(_handler))


def test_http_source_lists_plain_and_wrapped_bodies() -> None:
    source = _http_source()
    assert source.list_locations()[0].name == "Lima"
    assert source.list_environmental()[0].id == "e1"


def test_http_source_creates_journal_entry() -> None:
    entry = _http_source().create_journal_entry(
        JournalEntryCreate(location_id="1", date=date(2024, 2, 4), title="Hi", emotions=["joy"])
    )
    assert entry.id == "new"
    assert entry.emotions == ("joy",)


def test_http_source_raises_on_server_error() -> None:
    with pytest.raises(httpx.HTTPStatusError):
        _http_source().list_biological()


def test_http_source_requires_base_url(monkeypatch) -> None:
    monkeypatch.setattr("wildtrace.source.http.API_URL", "")
    with pytest.raises(ValueError, match="WILDTRACE_API_URL"):
        HttpRecordSource()


def test_csv_source_reads_digit_only_text_as_strings(tmp_path) -> None:
    source = CsvRecordSource(tmp_path)
    source.create_journal_entry(JournalEntryCreate(location_id="7", date=date(2024, 2, 4), title="1984", content="42"))

    entries = source.list_journal()
    assert entries[0].title == "1984"
    assert entries[0].content == "42"
    assert entries[0].location_id == "7"


def test_csv_source_reads_digit_only_location_name(tmp_path) -> None:
    (tmp_path / "locations.csv").write_text(
        "id,name,country,latitude,longitude,arrival_date,description\n"
        "1,1770,1,-24.2,151.9,2024-04-01,2024\n"
    )
    location = CsvRecordSource(tmp_path).list_locations()[0]
    assert location.name == "1770"
    assert location.country == "1"
    assert location.description == "2024"
    assert location.latitude == -24.2
