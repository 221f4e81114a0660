from abc import ABC, abstractmethod
from typing import Any

from glamour_storefront.core.application.ports.record_filter import RecordFilter


class DocumentStorePort(ABC):
    """Port for one persisted collection of records (products, orders, ...).

    Implementations MUST:
        - assign ``id`` plus ``created_at``/``updated_at`` on insert,
        - enforce the collection's unique fields atomically with the write and
          raise ``UniqueConstraintError`` on violation,
        - raise ``PersistenceError`` on any other storage failure.
    """

    collection: str

    @abstractmethod
    async def find_one(self, record_filter: RecordFilter) -> dict[str, Any] | None:
        """Return the first record matching *record_filter*, or None."""

    @abstractmethod
    async def find_many(self, record_filter: RecordFilter | None = None, limit: int = 200) -> list[dict[str, Any]]:
        """Return matching records, newest first by ``created_at``."""

    @abstractmethod
    async def count(self, record_filter: RecordFilter | None = None) -> int:
        pass

    @abstractmethod
    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record in a single atomic operation and return it as stored."""

    @abstractmethod
    async def update(self, record_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        """Apply *patch* to the record and return the updated record, or None when absent."""

    @abstractmethod
    async def delete(self, record_id: str) -> dict[str, Any] | None:
        """Remove the record and return it, or None when absent."""
