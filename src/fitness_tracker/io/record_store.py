"""
Record persistence on top of a key-value settings store.

The whole collection is written as one JSON blob under a single key; every
save replaces it. Loading never raises: a missing, corrupt or outdated blob
reads as an empty collection.
"""

import warnings

from ..core.config import RECORDS_KEY
from ..core.models import FitnessRecord
from .serializers import ValidationError, json_to_records, records_to_json
from .settings_store import JsonFileSettingsStore, SettingsStore, get_default_settings_path


class RecordStore:
    """
    Saves and loads the full record collection.

    The store keeps no copy of the records between calls; the caller owns
    the in-memory collection.
    """

    def __init__(self, settings: SettingsStore, key: str = RECORDS_KEY):
        """
        Initialize the record store.

        Args:
            settings: Key-value backend
            key: Settings key holding the blob
        """
        self.settings = settings
        self.key = key

    def save(self, records: list[FitnessRecord]) -> None:
        """
        Overwrite the stored blob with the given records.

        If the records can't be encoded the write is skipped and the previous
        blob is left untouched; the caller is not interrupted.

        Args:
            records: Complete collection to store
        """
        try:
            blob = records_to_json(list(records)).encode("utf-8")
        except (TypeError, ValueError, AttributeError) as e:
            warnings.warn(
                f"fitness-tracker: records not saved, encoding failed ({e})",
                stacklevel=2,
            )
            return

        self.settings.set(self.key, blob)

    def load(self) -> list[FitnessRecord]:
        """
        Load the stored records.

        Returns:
            Records in stored order; empty if nothing is stored or the blob
            doesn't match the current schema
        """
        blob = self.settings.get(self.key)
        if blob is None:
            return []

        try:
            return json_to_records(blob)
        except ValidationError:
            return []


def get_default_store() -> RecordStore:
    """
    Get a RecordStore backed by the default settings file.

    Returns:
        RecordStore instance
    """
    return RecordStore(JsonFileSettingsStore(get_default_settings_path()))
