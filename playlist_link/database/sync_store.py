"""Single-slot in-memory store for client sync data.

The slot holds one JSON-compatible value. Every upload replaces it
(last write wins, no merge). Nothing is persisted: the value lives only as
long as the process.

Usage:
    store = get_sync_store()
    store.store({"a": 1})
    data = store.retrieve()
"""

import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Any

from playlist_link.core.exceptions import SyncDataNotFoundError

logger = logging.getLogger(__name__)


class SyncStore:
    """Process-wide single-slot blob store."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: Any = None
        self._has_data = False
        self._updated_at: datetime | None = None

    def store(self, data: Any) -> None:
        """Replace the stored value."""
        snapshot = copy.deepcopy(data)
        with self._lock:
            self._data = snapshot
            self._has_data = True
            self._updated_at = datetime.now(timezone.utc)
        logger.info("Sync data stored", extra={"data_type": type(data).__name__})

    def retrieve(self) -> Any:
        """Return the most recently stored value.

        Raises:
            SyncDataNotFoundError: If nothing has been stored
        """
        with self._lock:
            if not self._has_data:
                raise SyncDataNotFoundError("No sync data has been uploaded")
            return copy.deepcopy(self._data)

    def clear(self) -> None:
        """Empty the slot."""
        with self._lock:
            self._data = None
            self._has_data = False
            self._updated_at = None

    @property
    def has_data(self) -> bool:
        return self._has_data

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at


# Global store instance
_sync_store: SyncStore | None = None
_sync_store_lock = threading.Lock()


def get_sync_store() -> SyncStore:
    """Get the global sync store instance.

    Returns:
        SyncStore singleton
    """
    global _sync_store
    with _sync_store_lock:
        if _sync_store is None:
            _sync_store = SyncStore()
        return _sync_store
