from fastapi import Query

from pagekit.core.config import settings
from pagekit.utils.pagination import PaginationArgs


def pagination_args(
    page: int | None = Query(default=None),
    page_index: int | None = Query(default=None, alias="pageIndex"),
    limit: int = Query(settings.DEFAULT_LIMIT, ge=1, le=settings.MAX_LIMIT),
) -> PaginationArgs:
    return PaginationArgs(limit=limit, page=page, page_index=page_index)
