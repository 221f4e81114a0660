from typing import Any

from glamour_storefront.core.exceptions.persistence_error import PersistenceError


class UniqueConstraintError(PersistenceError):
    """A write would give two records of the same collection an equal unique field."""

    def __init__(self, collection: str, field: str, value: Any):
        super().__init__(
            f"Duplicate value for unique field '{field}' in '{collection}': {value!r}",
            retryable=True,
        )
        self.collection = collection
        self.field = field
        self.value = value
