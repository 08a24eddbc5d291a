from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar, runtime_checkable

Q = TypeVar("Q", contravariant=True)
T = TypeVar("T", covariant=True)


@runtime_checkable
class DataSource(Protocol[Q, T]):
    """Counted collection a paginator reads windows from.

    ``fetch_window`` must return rows in a stable order for the same query,
    otherwise consecutive pages can overlap or skip rows.
    """

    async def count(self, query: Q) -> int | Mapping[str, Any]:
        """Total rows matching ``query``, independent of paging."""
        ...

    async def fetch_window(self, query: Q, offset: int, limit: Optional[int]) -> Sequence[T]:
        """Up to ``limit`` rows starting at ``offset``; ``limit=None`` is unbounded."""
        ...
