from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordFilter:
    """Equality / not-equality conditions combined with AND."""

    eq: Mapping[str, Any] = field(default_factory=dict)
    ne: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def where(cls, **eq: Any) -> RecordFilter:
        return cls(eq={k: v for k, v in eq.items() if v is not None})

    def excluding(self, **ne: Any) -> RecordFilter:
        extra = {k: v for k, v in ne.items() if v is not None}
        return RecordFilter(eq=dict(self.eq), ne={**self.ne, **extra})

    def matches(self, record: Mapping[str, Any]) -> bool:
        for key, value in self.eq.items():
            if record.get(key) != value:
                return False
        for key, value in self.ne.items():
            if record.get(key) == value:
                return False
        return True
