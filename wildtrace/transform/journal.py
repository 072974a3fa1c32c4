"""Journal page: entry filters, highlights, emotion tallies and mood trend."""

from collections import Counter
from collections.abc import Sequence

from wildtrace.config import ALL_LOCATIONS
from wildtrace.engine import filter_by_location, format_display_date, resolve_location_name, summarize_metric
from wildtrace.models import JournalEntry, Location


def filter_entries(
    entries: Sequence[JournalEntry],
    scope: str = ALL_LOCATIONS,
    emotion: str = "all",
    query: str = "",
) -> list[JournalEntry]:
    """Location scope, then emotion membership, then case-insensitive text search."""
    filtered = filter_by_location(entries, scope)
    if emotion != "all":
        filtered = [e for e in filtered if emotion in e.emotions]
    if query:
        needle = query.lower()
        filtered = [
            e for e in filtered
            if needle in (e.title or "").lower() or needle in (e.content or "").lower()
        ]
    return filtered


def highlight_moments(entries: Sequence[JournalEntry]) -> list[JournalEntry]:
    return [e for e in entries if e.highlight_moment]


def emotion_counts(entries: Sequence[JournalEntry], limit: int = 6) -> list[tuple[str, int]]:
    """Most frequent emotions; ties keep first-seen order."""
    counts = Counter()
    for entry in entries:
        counts.update(entry.emotions)
    return counts.most_common(limit)


def mood_trend(entries: Sequence[JournalEntry], locations: Sequence[Location]) -> list[dict]:
    return [
        {
            "date": e.date,
            "label": format_display_date(e.date),
            "mood": e.mood_score,
            "location": resolve_location_name(locations, e.location_id),
        }
        for e in entries
        if e.mood_score
    ]


def average_mood(entries: Sequence[JournalEntry]) -> float | None:
    return summarize_metric(entries, "mood_score").avg


def journal_page(
    entries: Sequence[JournalEntry],
    locations: Sequence[Location],
    scope: str = ALL_LOCATIONS,
    emotion: str = "all",
    query: str = "",
) -> dict:
    # Highlights, tallies and trend cover the whole journal, not the filtered view
    filtered = filter_entries(entries, scope, emotion, query)
    return {
        "entry_count": len(filtered),
        "entries": [
            {**e.model_dump(), "location_name": resolve_location_name(locations, e.location_id)}
            for e in filtered
        ],
        "highlights": [e.model_dump() for e in highlight_moments(entries)],
        "emotions": [{"emotion": name, "count": count} for name, count in emotion_counts(entries)],
        "mood_trend": mood_trend(entries, locations),
        "average_mood": average_mood(entries),
    }
