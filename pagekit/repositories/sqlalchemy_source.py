from typing import Any, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session


class SqlAlchemyDataSource:
    """Windows over a ``Select`` statement.

    ``query=None`` reads every row of ``model``. Either a sync ``Session`` or an
    ``AsyncSession`` can back the source. A sync ``Session`` runs its queries
    inline and blocks the event loop until they return, so it is only suited
    to non-concurrent use; concurrent callers should pass an ``AsyncSession``.
    """

    def __init__(self, db: Session | AsyncSession, model: Optional[type] = None) -> None:
        self._db = db
        self._model = model

    def _statement(self, query: Optional[Select]) -> Select:
        if query is not None:
            return query
        if self._model is None:
            raise ValueError("query is required when no model is bound")
        return select(self._model)

    async def count(self, query: Optional[Select] = None) -> int:
        stmt = self._statement(query)
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        if isinstance(self._db, AsyncSession):
            value = await self._db.scalar(count_stmt)
        else:
            value = self._db.scalar(count_stmt)
        return int(value or 0)

    async def fetch_window(self, query: Optional[Select], offset: int, limit: Optional[int]) -> list[Any]:
        stmt: Select = self._statement(query).offset(max(offset, 0))
        if limit is not None:
            stmt = stmt.limit(limit)
        if isinstance(self._db, AsyncSession):
            return list((await self._db.scalars(stmt)).all())
        return list(self._db.scalars(stmt).all())
