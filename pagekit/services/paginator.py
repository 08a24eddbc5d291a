import logging
from functools import partial
from typing import Any, Generic, Optional, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, Session

from pagekit.core.config import settings
from pagekit.repositories.base import DataSource
from pagekit.repositories.sqlalchemy_source import SqlAlchemyDataSource
from pagekit.services.result import PaginationResult
from pagekit.utils.exceptions import ExceedCount, ExceedTotalPages
from pagekit.utils.pagination import PaginationArgs, extract_count, next_page_args

logger = logging.getLogger(__name__)

Q = TypeVar("Q")
T = TypeVar("T")


class Paginator(Generic[Q, T]):
    def __init__(
        self,
        source: DataSource[Q, T],
        *,
        exceed_count: Optional[bool] = None,
        exceed_total_pages: Optional[bool] = None,
    ) -> None:
        self._source = source
        self._exceed_count = settings.EXCEED_COUNT if exceed_count is None else exceed_count
        self._exceed_total_pages = (
            settings.EXCEED_TOTAL_PAGES if exceed_total_pages is None else exceed_total_pages
        )

    async def paginate(self, query: Q, args: PaginationArgs) -> PaginationResult[Sequence[T]]:
        count = extract_count(await self._source.count(query))
        offset = args.offset
        logger.debug(f"Paginating. count={count} offset={offset} limit={args.limit}")
        rows = await self._source.fetch_window(query, offset, args.limit)

        try:
            return PaginationResult.build(
                count=count,
                args=args,
                result=rows,
                next_page=partial(self.paginate, query, next_page_args(args)),
                exceed_count=args.exceed_count is True or self._exceed_count,
                exceed_total_pages=args.exceed_total_pages is True or self._exceed_total_pages,
            )
        except (ExceedTotalPages, ExceedCount) as exc:
            logger.info(f"Page rejected: {exc}. pagination={exc.pagination.as_dict()}")
            raise

    async def fetch_all(self, query: Q) -> Sequence[T]:
        return await self._source.fetch_window(query, 0, None)


def paginate_models(db: Session | AsyncSession, base: type[DeclarativeBase], **options: Any) -> dict[str, Paginator]:
    """One paginator per mapped model of ``base``, keyed by table name."""
    paginators: dict[str, Paginator] = {}
    for mapper in base.registry.mappers:
        model = mapper.class_
        table = getattr(model, "__tablename__", None)
        if table is None:
            continue
        paginators[table] = Paginator(SqlAlchemyDataSource(db, model), **options)
    return paginators
