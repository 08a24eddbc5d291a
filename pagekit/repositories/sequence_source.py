from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


class SequenceDataSource(Generic[T]):
    def __init__(self, rows: Iterable[T]) -> None:
        self._rows = list(rows)

    def _select(self, query: Optional[Predicate]) -> list[T]:
        if query is None:
            return self._rows
        return [row for row in self._rows if query(row)]

    async def count(self, query: Optional[Predicate] = None) -> int:
        return len(self._select(query))

    async def fetch_window(self, query: Optional[Predicate], offset: int, limit: Optional[int]) -> list[T]:
        rows = self._select(query)
        start = max(offset, 0)
        if limit is None:
            return rows[start:]
        return rows[start : start + limit]
