from dataclasses import dataclass, replace
from typing import Any, Mapping

from pagekit.utils.exceptions import PaginationError


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PaginationArgs:
    """Page selection for one round.

    ``page`` is 1-based and wins over the 0-based ``page_index``.
    """

    limit: int
    page: int | None = None
    page_index: int | None = None
    exceed_count: bool | None = None
    exceed_total_pages: bool | None = None

    def __post_init__(self) -> None:
        if not _is_int(self.limit) or self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def offset(self) -> int:
        return resolve_offset(self.limit, self.page, self.page_index)

    @property
    def resolved_page(self) -> int:
        return resolve_page(self.page, self.page_index)


def resolve_page(page: int | None, page_index: int | None) -> int:
    if _is_int(page):
        return 1 if page == 0 else page
    if _is_int(page_index):
        return page_index + 1
    return 1


def resolve_offset(limit: int, page: int | None, page_index: int | None) -> int:
    # zero and negative pages are not clamped
    if _is_int(page):
        return limit * (page - 1 if page > 0 else page)
    if _is_int(page_index):
        return limit * page_index
    return 0


def next_page_args(args: PaginationArgs) -> PaginationArgs:
    if _is_int(args.page):
        return replace(args, page=(args.page or 0) + 1, page_index=None)
    return replace(args, page=None, page_index=(args.page_index or 0) + 1)


def extract_count(value: int | Mapping[str, Any]) -> int:
    """Read a row count reported either as a plain int or as an aggregate."""
    if _is_int(value):
        return value
    if isinstance(value, Mapping):
        for key in ("_all", "_count"):
            if _is_int(value.get(key)):
                return value[key]
    raise PaginationError(f"Cannot read row count from {value!r}")
