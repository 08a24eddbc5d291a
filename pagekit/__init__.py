from pagekit.repositories.base import DataSource
from pagekit.repositories.sequence_source import SequenceDataSource
from pagekit.repositories.sqlalchemy_source import SqlAlchemyDataSource
from pagekit.services.paginator import Paginator, paginate_models
from pagekit.services.result import Pagination, PaginationResult
from pagekit.utils.exceptions import DomainError, ExceedCount, ExceedTotalPages, PaginationError
from pagekit.utils.pagination import (
    PaginationArgs,
    extract_count,
    next_page_args,
    resolve_offset,
    resolve_page,
)

__all__ = [
    "DataSource",
    "DomainError",
    "ExceedCount",
    "ExceedTotalPages",
    "Pagination",
    "PaginationArgs",
    "PaginationError",
    "PaginationResult",
    "Paginator",
    "SequenceDataSource",
    "SqlAlchemyDataSource",
    "extract_count",
    "next_page_args",
    "paginate_models",
    "resolve_offset",
    "resolve_page",
]
