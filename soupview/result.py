"""
Query Result - success value or typed failure
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass
class QueryResult(Generic[T]):
    """Result of a fallible query, parse or fetch"""
    value: Optional[T] = None
    error: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried SoupError on failure"""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self.error is not None else self.value

    def __bool__(self):
        return self.ok
