"""
In-memory record collection with write-through persistence.

RecordLog owns the list of records shown to the user. Each mutation is
followed by a save of the complete collection.
"""

from typing import Protocol

from .grouping import group_by_day, sorted_day_labels
from .models import FitnessRecord


class RecordSink(Protocol):
    """Anything that can persist and restore a full record collection."""

    def save(self, records: list[FitnessRecord]) -> None: ...

    def load(self) -> list[FitnessRecord]: ...


class RecordLog:
    """
    The user's exercise log.

    Not thread-safe: one caller mutates the collection at a time.
    """

    def __init__(self, store: RecordSink, records: list[FitnessRecord] | None = None):
        """
        Initialize the log.

        Args:
            store: Persistence target for every mutation
            records: Initial collection (copied)
        """
        self.store = store
        self._records: list[FitnessRecord] = list(records or [])

    @classmethod
    def load(cls, store: RecordSink) -> "RecordLog":
        """Create a log holding whatever the store currently has."""
        return cls(store, store.load())

    @property
    def records(self) -> list[FitnessRecord]:
        """Copy of the collection in insertion order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: FitnessRecord) -> None:
        """Append a record and persist."""
        self._records.append(record)
        self.store.save(self._records)

    def delete(self, record_id: str) -> FitnessRecord | None:
        """
        Remove the record with the given id and persist.

        The collection is saved even when no record matches.

        Args:
            record_id: Exact record id

        Returns:
            The removed record, or None if no record had that id
        """
        removed: FitnessRecord | None = None
        for i, record in enumerate(self._records):
            if record.id == record_id:
                removed = self._records.pop(i)
                break
        self.store.save(self._records)
        return removed

    def find(self, record_id: str) -> FitnessRecord | None:
        """Return the record with the given id, or None."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def resolve_id(self, prefix: str) -> str:
        """
        Expand a (possibly shortened) record id.

        Args:
            prefix: Full id or leading characters of one

        Returns:
            The matching full id

        Raises:
            LookupError: If no record or more than one record matches
        """
        prefix = prefix.strip()
        if not prefix:
            raise LookupError("Record id cannot be empty")

        exact = self.find(prefix)
        if exact is not None:
            return exact.id

        matches = [r.id for r in self._records if r.id.startswith(prefix)]
        if not matches:
            raise LookupError(f"No record with id {prefix!r}")
        if len(matches) > 1:
            raise LookupError(f"Id {prefix!r} is ambiguous ({len(matches)} records match)")
        return matches[0]

    def grouped(self) -> dict[str, list[FitnessRecord]]:
        """Records bucketed by day label."""
        return group_by_day(self._records)

    def day_labels(self) -> list[str]:
        """Day labels in display order."""
        return sorted_day_labels(self.grouped())
