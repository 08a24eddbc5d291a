import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from pagekit.utils.exceptions import ExceedCount, ExceedTotalPages, PaginationError
from pagekit.utils.pagination import PaginationArgs

T = TypeVar("T")

NextPage = Callable[[], Awaitable["PaginationResult[T]"]]


@dataclass(frozen=True)
class Pagination:
    count: int
    limit: int
    page: int
    exceed_count: bool = False
    exceed_total_pages: bool = False

    @property
    def total_pages(self) -> int:
        return math.ceil(self.count / self.limit)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev_page(self) -> bool:
        # one page past the end still links back
        return self.count > 0 and self.page > 1 and self.page <= self.total_pages + 1

    def validate(self) -> None:
        if self.exceed_total_pages and self.page > self.total_pages:
            raise ExceedTotalPages(self)
        if self.exceed_count and self.limit * self.page > self.count:
            raise ExceedCount(self)

    def as_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(Pagination)}
        data.update(
            total_pages=self.total_pages,
            has_next_page=self.has_next_page,
            has_prev_page=self.has_prev_page,
        )
        return data


@dataclass(frozen=True)
class PaginationResult(Pagination, Generic[T]):
    """One validated page window plus the way to fetch the window after it."""

    result: Optional[T] = None
    _next_page: Optional[NextPage] = field(default=None, repr=False, compare=False)

    @classmethod
    def build(
        cls,
        *,
        count: int,
        args: PaginationArgs,
        result: T,
        next_page: Optional[NextPage] = None,
        exceed_count: bool = False,
        exceed_total_pages: bool = False,
    ) -> "PaginationResult[T]":
        pagination = Pagination(
            count=count,
            limit=args.limit,
            page=args.resolved_page,
            exceed_count=exceed_count,
            exceed_total_pages=exceed_total_pages,
        )
        pagination.validate()
        return cls(**asdict(pagination), result=result, _next_page=next_page)

    async def next_page(self) -> "PaginationResult[T]":
        if self._next_page is None:
            raise PaginationError("Result is not bound to a data source")
        return await self._next_page()
