from datetime import date, datetime

import pytest

from wildtrace.models import BiologicalData, EnvironmentalData, JournalEntry, Location
from wildtrace.snapshot import JourneySnapshot


@pytest.fixture
def locations() -> list[Location]:
    return [
        Location(
            id="kyoto", name="Kyoto", country="Japan", latitude=35.0, longitude=135.8,
            arrival_date=date(2024, 3, 1), departure_date=date(2024, 3, 5),
        ),
        Location(
            id="lima", name="Lima", country="Peru", latitude=-12.0, longitude=-77.0,
            arrival_date=date(2024, 2, 1), departure_date=date(2024, 2, 10),
        ),
    ]


@pytest.fixture
def environmental() -> list[EnvironmentalData]:
    return [
        EnvironmentalData(
            id="e1", location_id="kyoto", date=date(2024, 3, 1), temperature_avg=10,
            temperature_min=4, temperature_max=14, humidity=60, light_exposure=5000,
            air_quality_index=40, noise_level=50, weather_condition="clear",
        ),
        EnvironmentalData(
            id="e2", location_id="kyoto", date=date(2024, 3, 2), temperature_avg=20,
            temperature_min=12, temperature_max=25, humidity=80, light_exposure=20000,
            air_quality_index=100, noise_level=70,
        ),
        EnvironmentalData(
            id="e3", location_id="lima", date=date(2024, 2, 3), temperature_avg=24,
            temperature_min=19, temperature_max=28, humidity=None,
        ),
    ]


@pytest.fixture
def biological() -> list[BiologicalData]:
    return [
        BiologicalData(
            id="b1", location_id="kyoto", date=datetime(2024, 3, 1, 7), heart_rate_resting=58,
            heart_rate_variability=50, sleep_quality_score=10, sleep_duration=8, stress_level=0,
        ),
        BiologicalData(
            id="b2", location_id="lima", date=datetime(2024, 2, 3, 7), heart_rate_resting=66,
            heart_rate_variability=30, sleep_quality_score=6, sleep_duration=6, stress_level=7,
        ),
        BiologicalData(
            id="b3", location_id="gone", date=datetime(2024, 2, 4, 7), heart_rate_resting=62,
            heart_rate_variability=50, sleep_quality_score=4, sleep_duration=5, stress_level=4,
        ),
    ]


@pytest.fixture
def journal() -> list[JournalEntry]:
    return [
        JournalEntry(
            id="j1", location_id="kyoto", date=date(2024, 3, 2), title="Temple morning",
            content="Quiet moss garden", emotions=["calm", "wonder"], mood_score=9,
            highlight_moment=True,
        ),
        JournalEntry(
            id="j2", location_id="lima", date=date(2024, 2, 4), title="Market day",
            content="Ceviche and noise", emotions=["joy", "fatigue", "calm"], mood_score=7,
        ),
        JournalEntry(
            id="j3", location_id="lima", date=date(2024, 2, 5), title="Rain",
            content="Stayed in", emotions=["melancholy"],
        ),
    ]


@pytest.fixture
def snapshot(locations, environmental, biological, journal) -> JourneySnapshot:
    return JourneySnapshot(
        locations=tuple(locations),
        environmental=tuple(environmental),
        biological=tuple(biological),
        journal=tuple(journal),
    )
