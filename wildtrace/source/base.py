"""Abstract base class for journey record sources."""

import abc

from wildtrace.models import BiologicalData, EnvironmentalData, JournalEntry, JournalEntryCreate, Location


def parse_order_by(order_by: str | None) -> tuple[str | None, bool]:
    """Split "-date" into ("date", descending=True)."""
    if not order_by:
        return None, False
    if order_by.startswith("-"):
        return order_by[1:], True
    return order_by, False


class RecordSource(abc.ABC):
    """Backend every page loads its collections from."""

    @property
    @abc.abstractmethod
    def source_name(self) -> str:
        """Short label used in progress output (e.g. 'csv', 'http')."""

    @abc.abstractmethod
    def list_locations(self, order_by: str | None = "arrival_date") -> list[Location]:
        """All locations, sorted by ``order_by`` ("-field" for descending)."""

    @abc.abstractmethod
    def list_environmental(self, order_by: str | None = "date") -> list[EnvironmentalData]:
        ...

    @abc.abstractmethod
    def list_biological(self, order_by: str | None = "date") -> list[BiologicalData]:
        ...

    @abc.abstractmethod
    def list_journal(self, order_by: str | None = "date") -> list[JournalEntry]:
        ...

    @abc.abstractmethod
    def create_journal_entry(self, record: JournalEntryCreate) -> JournalEntry:
        """Persist a new journal entry and return it with its assigned id."""

    def close(self) -> None:
        """Release any connections held by the source."""
