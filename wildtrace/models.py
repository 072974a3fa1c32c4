"""Pydantic models for the four journey collections."""

from datetime import date, datetime
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Emotion = Literal[
    "calm",
    "joy",
    "excitement",
    "fear",
    "anxiety",
    "fatigue",
    "wonder",
    "peace",
    "stress",
    "curiosity",
    "melancholy",
    "euphoria",
]

EMOTIONS: tuple[str, ...] = get_args(Emotion)


class Record(BaseModel):
    """Immutable snapshot row as returned by a record source."""

    model_config = ConfigDict(frozen=True)


class Location(Record):
    id: str
    name: str
    country: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    arrival_date: date
    departure_date: Optional[date] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def _departure_after_arrival(self) -> "Location":
        if self.departure_date is not None and self.departure_date < self.arrival_date:
            raise ValueError(
                f"departure_date {self.departure_date} is before arrival_date {self.arrival_date}"
            )
        return self


class EnvironmentalData(Record):
    id: str
    location_id: Optional[str] = None
    date: date
    temperature_avg: Optional[float] = None
    temperature_min: Optional[float] = None
    temperature_max: Optional[float] = None
    humidity: Optional[float] = None
    light_exposure: Optional[float] = None
    air_quality_index: Optional[float] = None
    noise_level: Optional[float] = None
    weather_condition: Optional[str] = None


class BiologicalData(Record):
    id: str
    location_id: Optional[str] = None
    date: datetime
    heart_rate_resting: Optional[float] = None
    heart_rate_active: Optional[float] = None
    heart_rate_variability: Optional[float] = None
    body_temperature: Optional[float] = None
    sleep_quality_score: Optional[float] = None
    sleep_duration: Optional[float] = None
    respiratory_rate: Optional[float] = None
    activity_level: Optional[float] = None
    stress_level: Optional[float] = None


class JournalEntryCreate(Record):
    location_id: Optional[str] = None
    date: date
    title: str
    content: str = ""
    emotions: tuple[Emotion, ...] = ()
    mood_score: Optional[int] = Field(default=None, ge=1, le=10)
    highlight_moment: bool = False
    image_url: Optional[str] = None
    audio_url: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def _blank_content(cls, value):
        return "" if value is None else value

    @field_validator("emotions", mode="before")
    @classmethod
    def _split_emotions(cls, value):
        """Accept "calm; joy" strings and drop repeated emotions."""
        if value is None:
            return ()
        if isinstance(value, str):
            value = [part.strip() for part in value.split(";")]
        seen = []
        for emotion in value:
            if emotion and emotion not in seen:
                seen.append(emotion)
        return tuple(seen)


class JournalEntry(JournalEntryCreate):
    id: str
